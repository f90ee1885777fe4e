"""HTTP adapter that sends requests to xAI."""
from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from typing import Any

from xai_provider._http import HttpClient
from xai_provider.capabilities import supports_vision
from xai_provider.config import XAIConfig
from xai_provider.provider import XAIProvider, xai
from xai_provider.types.request import Request
from xai_provider.types.response import Response
from xai_provider.types.streaming import StreamEvent

logger = logging.getLogger("xai_provider")


class XAIAdapter:
    """Joins the provider's connection facts with its wire protocol.

    The adapter does not validate configuration; run
    :func:`xai_provider.config.validate_configuration` first.
    """

    def __init__(
        self,
        config: XAIConfig,
        provider: XAIProvider | None = None,
        http_client: HttpClient | None = None,
    ) -> None:
        self._provider = provider or xai
        self._config = config
        self._http = http_client or HttpClient(
            base_url=self._provider.base_endpoint(config),
            headers=self._provider.auth_headers(config),
            timeout=config.timeout,
            provider=self._provider.provider_slug(),
        )

    @property
    def name(self) -> str:
        return self._provider.provider_slug()

    def complete(self, request: Request) -> Response:
        """Send a request and return the full response."""
        protocol = self._provider.protocol
        body = self._prepare(request)
        start = time.monotonic()
        raw = self._http.post(protocol.path, json=body)
        response = protocol.parse_response(raw, self.name)
        logger.debug(
            "%s response: model=%s tokens=%d latency=%.2fs",
            self.name,
            request.model,
            response.usage.total_tokens,
            time.monotonic() - start,
        )
        return response

    def stream(self, request: Request) -> Iterator[StreamEvent]:
        """Send a request and yield streaming events."""
        protocol = self._provider.protocol
        body = self._prepare(request)
        body["stream"] = True
        lines = self._http.post_stream(protocol.path, json=body)
        yield from protocol.parse_stream(lines, self.name)

    def _prepare(self, request: Request) -> dict[str, Any]:
        if request.has_images and not supports_vision(request.model):
            logger.warning(
                "Model %s does not advertise vision; sending images anyway",
                request.model,
            )
        logger.debug("%s request: model=%s", self.name, request.model)
        return self._provider.protocol.build_request_body(request)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def __enter__(self) -> XAIAdapter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
