"""Model descriptor types."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from xai_provider.types.enums import ModelFamily


@dataclass(frozen=True)
class TokenPrice:
    """USD price per million tokens."""

    input_per_million: float
    output_per_million: float


@dataclass(frozen=True)
class Modalities:
    """Media a model accepts and produces."""

    input: tuple[str, ...] = ("text",)
    output: tuple[str, ...] = ("text",)


@dataclass(frozen=True)
class ModelDescriptor:
    """Capabilities and cost of a single model, derived at lookup time."""

    id: str
    """API identifier (e.g., "grok-3-mini")."""

    name: str
    """Human-readable name."""

    provider: str
    """Slug of the provider that serves the model."""

    family: ModelFamily
    """Price tier."""

    created_at: datetime
    """When this descriptor was built, not when the model was released."""

    context_window: int
    """Max total tokens."""

    max_output_tokens: int
    """Max generated tokens."""

    modalities: Modalities = field(default_factory=Modalities)

    capabilities: tuple[str, ...] = ()
    """Capability tags such as "streaming" or "vision"."""

    pricing: dict[str, Any] = field(default_factory=dict, hash=False)
    """``text_tokens -> standard -> {input_per_million, output_per_million}``."""

    metadata: dict[str, Any] = field(default_factory=dict, hash=False)

    @property
    def supports_vision(self) -> bool:
        return "vision" in self.capabilities

    @property
    def supports_tools(self) -> bool:
        return "tools" in self.capabilities

    @property
    def input_price_per_million(self) -> float:
        return self.pricing["text_tokens"]["standard"]["input_per_million"]

    @property
    def output_price_per_million(self) -> float:
        return self.pricing["text_tokens"]["standard"]["output_per_million"]

    def to_dict(self) -> dict[str, Any]:
        """Render the descriptor as plain JSON-compatible data."""
        return {
            "id": self.id,
            "name": self.name,
            "provider": self.provider,
            "family": str(self.family),
            "created_at": self.created_at.isoformat(),
            "context_window": self.context_window,
            "max_output_tokens": self.max_output_tokens,
            "modalities": {
                "input": list(self.modalities.input),
                "output": list(self.modalities.output),
            },
            "capabilities": list(self.capabilities),
            "pricing": {
                category: {tier: dict(prices) for tier, prices in tiers.items()}
                for category, tiers in self.pricing.items()
            },
            "metadata": dict(self.metadata),
        }
