"""Tests for the xAI HTTP adapter."""
from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import pytest

from xai_provider._http import HttpClient
from xai_provider.adapter import XAIAdapter
from xai_provider.config import XAIConfig
from xai_provider.errors import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
)
from xai_provider.provider import xai
from xai_provider.types.enums import FinishReason, StreamEventType
from xai_provider.types.messages import ImageInput, Message
from xai_provider.types.request import Request


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_adapter(handler, api_key: str | None = "test-key") -> XAIAdapter:
    """Create an adapter wired to a mock transport."""
    config = XAIConfig(xai_api_key=api_key)
    http = HttpClient(
        base_url=xai.base_endpoint(config),
        headers=xai.auth_headers(config),
        provider="xai",
        transport=httpx.MockTransport(handler),
    )
    return XAIAdapter(config, http_client=http)


def _simple_response(**overrides: Any) -> dict[str, Any]:
    base = {
        "id": "msg_123",
        "model": "grok-3",
        "content": [{"type": "text", "text": "Hello!"}],
        "stop_reason": "end_turn",
        "usage": {"input_tokens": 10, "output_tokens": 5},
    }
    base.update(overrides)
    return base


def _request(model: str = "grok-3", **kwargs: Any) -> Request:
    return Request(model=model, messages=(Message.user("Hi"),), **kwargs)


# ===========================================================================
# complete()
# ===========================================================================


class TestComplete:
    def test_url_headers_and_body(self) -> None:
        captured: dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("authorization")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_simple_response())

        with _make_adapter(handler) as adapter:
            response = adapter.complete(_request())

        assert captured["url"] == "https://api.x.ai/v1/messages"
        assert captured["auth"] == "Bearer test-key"
        assert captured["body"]["model"] == "grok-3"
        assert captured["body"]["max_tokens"] == 8_192
        assert "stream" not in captured["body"]
        assert response.text == "Hello!"
        assert response.provider == "xai"
        assert response.finish_reason == FinishReason.STOP
        assert response.usage.total_tokens == 15

    def test_missing_key_sends_bare_bearer(self) -> None:
        captured: dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json=_simple_response())

        _make_adapter(handler, api_key=None).complete(_request())
        assert captured["auth"].strip() == "Bearer"

    def test_name(self) -> None:
        adapter = _make_adapter(lambda r: httpx.Response(200, json={}))
        assert adapter.name == "xai"

    def test_default_http_client(self) -> None:
        adapter = XAIAdapter(XAIConfig(xai_api_key="k"))
        try:
            assert adapter._http.base_url.startswith("https://api.x.ai/v1")
        finally:
            adapter.close()


class TestErrors:
    @pytest.mark.parametrize(
        "status, cls",
        [
            (401, AuthenticationError),
            (404, NotFoundError),
            (429, RateLimitError),
            (500, ServerError),
        ],
    )
    def test_status_mapping(self, status: int, cls: type) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status, json={"error": {"type": "api_error", "message": "nope"}}
            )

        with pytest.raises(cls) as exc_info:
            _make_adapter(handler).complete(_request())
        assert exc_info.value.status_code == status
        assert exc_info.value.provider == "xai"
        assert str(exc_info.value) == "nope"

    def test_string_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "Incorrect API key provided"})

        with pytest.raises(Exception, match="Incorrect API key"):
            _make_adapter(handler).complete(_request())

    def test_retry_after_header(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, headers={"retry-after": "3"}, text="slow down")

        with pytest.raises(RateLimitError) as exc_info:
            _make_adapter(handler).complete(_request())
        assert exc_info.value.retry_after == 3.0
        assert str(exc_info.value) == "slow down"

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(RequestTimeoutError):
            _make_adapter(handler).complete(_request())

    def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(NetworkError):
            _make_adapter(handler).complete(_request())


# ===========================================================================
# stream()
# ===========================================================================


class TestStream:
    def test_stream_events(self) -> None:
        captured: dict[str, Any] = {}
        sse = "\n".join([
            "event: message_start",
            'data: {"type": "message_start", "message": {"usage": {"input_tokens": 4}}}',
            "",
            "event: content_block_delta",
            'data: {"delta": {"type": "text_delta", "text": "Hi"}}',
            "",
            "event: message_delta",
            'data: {"delta": {"stop_reason": "end_turn"}, "usage": {"output_tokens": 1}}',
            "",
            "event: message_stop",
            "data: {}",
            "",
        ])

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                200, text=sse, headers={"content-type": "text/event-stream"}
            )

        events = list(_make_adapter(handler).stream(_request()))
        assert captured["body"]["stream"] is True
        assert [e.type for e in events] == [
            StreamEventType.STREAM_START,
            StreamEventType.TEXT_DELTA,
            StreamEventType.FINISH,
        ]
        assert events[1].delta == "Hi"
        assert events[-1].usage is not None
        assert events[-1].usage.total_tokens == 5

    def test_stream_http_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": {"message": "bad key"}})

        with pytest.raises(AuthenticationError, match="bad key"):
            list(_make_adapter(handler).stream(_request()))


# ===========================================================================
# Logging
# ===========================================================================


class TestVisionWarning:
    def _image_request(self, model: str) -> Request:
        msg = Message.user("look", images=(ImageInput(url="https://example.com/a.png"),))
        return Request(model=model, messages=(msg,))

    def test_warns_for_text_only_model(self, caplog: pytest.LogCaptureFixture) -> None:
        adapter = _make_adapter(lambda r: httpx.Response(200, json=_simple_response()))
        with caplog.at_level(logging.WARNING, logger="xai_provider"):
            adapter.complete(self._image_request("grok-3"))
        assert "does not advertise vision" in caplog.text

    def test_silent_for_vision_model(self, caplog: pytest.LogCaptureFixture) -> None:
        adapter = _make_adapter(lambda r: httpx.Response(200, json=_simple_response()))
        with caplog.at_level(logging.WARNING, logger="xai_provider"):
            adapter.complete(self._image_request("grok-2-vision"))
        assert "does not advertise vision" not in caplog.text
