"""Static catalog of the models xAI serves."""
from __future__ import annotations

from xai_provider import capabilities
from xai_provider.types.descriptor import ModelDescriptor

PROVIDER_SLUG = "xai"

# Flagship first.
KNOWN_MODELS: tuple[str, ...] = (
    "grok-4",
    "grok-3",
    "grok-3-mini",
    "grok-2",
    "grok-2-vision",
    "grok-vision-beta",
)


def is_known_model(model_id: str) -> bool:
    """Return whether *model_id* is part of the static catalog."""
    return model_id in KNOWN_MODELS


def list_models(
    provider_slug: str = PROVIDER_SLUG, *, capability: str | None = None
) -> list[ModelDescriptor]:
    """Return descriptors for the catalog, in definition order.

    When *capability* is given, only models carrying that tag are
    returned. Nothing is fetched from the remote service.
    """
    models = [
        capabilities.build_descriptor(model_id, provider_slug)
        for model_id in KNOWN_MODELS
    ]
    if capability is None:
        return models
    return [m for m in models if capability in m.capabilities]


def get_model_info(
    model_id: str, provider_slug: str = PROVIDER_SLUG
) -> ModelDescriptor | None:
    """Look up a catalog model by exact ID.

    Returns ``None`` for identifiers outside the catalog. Use
    :func:`xai_provider.capabilities.build_descriptor` to get a
    descriptor with defaults for arbitrary identifiers.
    """
    if not is_known_model(model_id):
        return None
    return capabilities.build_descriptor(model_id, provider_slug)


def get_latest_model(
    capability: str | None = None, provider_slug: str = PROVIDER_SLUG
) -> ModelDescriptor | None:
    """Return the first (flagship) catalog model, optionally with *capability*."""
    candidates = list_models(provider_slug, capability=capability)
    return candidates[0] if candidates else None
