"""xAI provider: connection facts and the static model listing."""
from __future__ import annotations

import logging

from xai_provider import catalog
from xai_provider.protocol import AnthropicMessagesProtocol
from xai_provider.types.descriptor import ModelDescriptor

logger = logging.getLogger("xai_provider")

API_BASE = "https://api.x.ai/v1"
API_KEY_SETTING = "xai_api_key"


class XAIProvider:
    """Connection facts for the xAI API.

    xAI speaks the Anthropic Messages wire format, so the provider holds an
    :class:`AnthropicMessagesProtocol` and hands it to the transport.
    """

    def __init__(self, protocol: AnthropicMessagesProtocol | None = None) -> None:
        self.protocol = protocol or AnthropicMessagesProtocol()

    @property
    def name(self) -> str:
        return self.provider_slug()

    def provider_slug(self) -> str:
        return catalog.PROVIDER_SLUG

    def base_endpoint(self, config: object) -> str:
        """Return the API base URL. The endpoint is fixed; *config* is unused."""
        return API_BASE

    def auth_headers(self, config: object) -> dict[str, str]:
        """Build the ``Authorization`` header from ``config.xai_api_key``.

        The key is not checked here. A missing key produces a bare
        ``"Bearer "`` value; presence is enforced by
        :func:`xai_provider.config.validate_configuration` at load time.
        """
        api_key = getattr(config, API_KEY_SETTING, None) or ""
        return {"Authorization": f"Bearer {api_key}"}

    def required_configuration_keys(self) -> frozenset[str]:
        return frozenset({API_KEY_SETTING})

    def list_models(self) -> list[ModelDescriptor]:
        """Return descriptors for every catalog model, in catalog order.

        This enumerates the compiled-in catalog; it never calls the API.
        """
        models = catalog.list_models(self.provider_slug())
        logger.debug("Listed %d %s models", len(models), self.provider_slug())
        return models


xai = XAIProvider()
