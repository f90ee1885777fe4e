"""Capabilities and pricing for xAI models.

Every function here is pure and total: an identifier outside the known
set resolves to documented defaults instead of raising.
"""
from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Mapping

from xai_provider.types.descriptor import Modalities, ModelDescriptor, TokenPrice
from xai_provider.types.enums import ModelFamily

DEFAULT_CONTEXT_WINDOW = 128_000
DEFAULT_MAX_OUTPUT_TOKENS = 8_192
DEFAULT_PRICE = TokenPrice(input_per_million=1.0, output_per_million=1.0)

_FAMILIES: Mapping[str, ModelFamily] = MappingProxyType({
    "grok-4": ModelFamily.GROK_4,
    "grok-3": ModelFamily.GROK_3,
    "grok-3-mini": ModelFamily.GROK_3_MINI,
    "grok-2": ModelFamily.GROK_2,
    "grok-2-vision": ModelFamily.GROK_2_VISION,
    "grok-vision-beta": ModelFamily.GROK_VISION_BETA,
})

_CONTEXT_WINDOWS: Mapping[str, int] = MappingProxyType({
    "grok-4": 256_000,
    "grok-3": 1_000_000,
    "grok-3-mini": 131_072,
    "grok-2": 128_000,
    "grok-2-vision": 128_000,
    "grok-vision-beta": 131_072,
})

_VISION_MODELS = frozenset({"grok-2-vision", "grok-vision-beta"})

# USD per 1M tokens. Grok 2 and both vision variants bill at the same tier.
_GROK_3_PRICE = TokenPrice(input_per_million=3.0, output_per_million=15.0)
_GROK_2_PRICE = TokenPrice(input_per_million=5.0, output_per_million=15.0)

PRICES: Mapping[ModelFamily, TokenPrice] = MappingProxyType({
    ModelFamily.GROK_4: _GROK_3_PRICE,
    ModelFamily.GROK_3: _GROK_3_PRICE,
    ModelFamily.GROK_3_MINI: TokenPrice(input_per_million=0.25, output_per_million=0.50),
    ModelFamily.GROK_2: _GROK_2_PRICE,
    ModelFamily.GROK_2_VISION: _GROK_2_PRICE,
    ModelFamily.GROK_VISION_BETA: _GROK_2_PRICE,
})


def family_of(model_id: str) -> ModelFamily:
    """Return the price family for *model_id*, or ``ModelFamily.UNKNOWN``."""
    return _FAMILIES.get(model_id, ModelFamily.UNKNOWN)


def context_window(model_id: str) -> int:
    """Return the context window size in tokens."""
    return _CONTEXT_WINDOWS.get(model_id, DEFAULT_CONTEXT_WINDOW)


def max_output_tokens(model_id: str) -> int:
    """Return the maximum number of tokens the model can generate."""
    return DEFAULT_MAX_OUTPUT_TOKENS


def supports_vision(model_id: str) -> bool:
    return model_id in _VISION_MODELS


def supports_functions(model_id: str) -> bool:
    return True


def supports_json_mode(model_id: str) -> bool:
    return True


def model_type(model_id: str) -> str:
    return "chat"


def price_of(model_id: str) -> TokenPrice:
    """Return the per-million token price, falling back to ``DEFAULT_PRICE``."""
    return PRICES.get(family_of(model_id), DEFAULT_PRICE)


def input_price(model_id: str) -> float:
    """Return the USD price per million input tokens."""
    return price_of(model_id).input_per_million


def output_price(model_id: str) -> float:
    """Return the USD price per million output tokens."""
    return price_of(model_id).output_per_million


def modalities(model_id: str) -> Modalities:
    """Return input/output media. Image input is added for vision models."""
    inputs = ["text"]
    if supports_vision(model_id):
        inputs.append("image")
    return Modalities(input=tuple(inputs), output=("text",))


def capability_tags(model_id: str) -> tuple[str, ...]:
    tags = ["streaming", "json_mode"]
    if supports_vision(model_id):
        tags.append("vision")
    if supports_functions(model_id):
        tags.append("tools")
    return tuple(tags)


def pricing(model_id: str) -> dict[str, Any]:
    """Return the nested pricing structure for *model_id*.

    Shape: ``{"text_tokens": {"standard": {"input_per_million": float,
    "output_per_million": float}}}``.
    """
    price = price_of(model_id)
    return {
        "text_tokens": {
            "standard": {
                "input_per_million": price.input_per_million,
                "output_per_million": price.output_per_million,
            }
        }
    }


def display_name(model_id: str) -> str:
    """Format *model_id* for humans: ``"grok-3-mini"`` -> ``"Grok 3 Mini"``."""
    # Trailing hyphens yield no empty segments.
    return " ".join(segment.capitalize() for segment in model_id.rstrip("-").split("-"))


def estimate_cost(model_id: str, input_tokens: int, output_tokens: int) -> float:
    """Estimate the USD cost of a call.

    Raises:
        ValueError: If either token count is negative.
    """
    if input_tokens < 0 or output_tokens < 0:
        raise ValueError(
            f"Token counts must be non-negative, got input={input_tokens} "
            f"output={output_tokens}"
        )
    price = price_of(model_id)
    return (
        input_tokens * price.input_per_million
        + output_tokens * price.output_per_million
    ) / 1_000_000


def build_descriptor(
    model_id: str,
    provider_slug: str,
    *,
    created_at: datetime | None = None,
) -> ModelDescriptor:
    """Build a fresh :class:`ModelDescriptor` for *model_id*.

    ``created_at`` defaults to the current UTC time.
    """
    return ModelDescriptor(
        id=model_id,
        name=display_name(model_id),
        provider=provider_slug,
        family=family_of(model_id),
        created_at=created_at or datetime.now(timezone.utc),
        context_window=context_window(model_id),
        max_output_tokens=max_output_tokens(model_id),
        modalities=modalities(model_id),
        capabilities=capability_tags(model_id),
        pricing=pricing(model_id),
        metadata={},
    )
