"""Wire protocols: how requests are encoded and responses decoded.

A provider picks a protocol by holding an instance of it; the transport
only talks to the :class:`RequestBuilder` and :class:`ResponseParser`
interfaces.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from typing import Any, Protocol, runtime_checkable

from xai_provider._sse import parse_sse_lines
from xai_provider.capabilities import max_output_tokens
from xai_provider.errors import StreamError
from xai_provider.types.enums import FinishReason, Role, StreamEventType
from xai_provider.types.messages import ImageInput, Message, ToolResult
from xai_provider.types.request import Request
from xai_provider.types.response import Response, ToolCall, Usage
from xai_provider.types.streaming import StreamEvent


@runtime_checkable
class RequestBuilder(Protocol):
    """Encodes a :class:`Request` into an HTTP body."""

    @property
    def path(self) -> str:
        """Endpoint path, relative to the provider's base URL."""
        ...

    def build_request_body(self, request: Request) -> dict[str, Any]:
        ...


@runtime_checkable
class ResponseParser(Protocol):
    """Decodes HTTP payloads into responses and stream events."""

    def parse_response(self, raw: dict[str, Any], provider: str) -> Response:
        ...

    def parse_stream(self, lines: Iterable[str], provider: str) -> Iterator[StreamEvent]:
        ...


_STOP_REASONS = {
    "end_turn": FinishReason.STOP,
    "stop_sequence": FinishReason.STOP,
    "max_tokens": FinishReason.LENGTH,
    "tool_use": FinishReason.TOOL_CALLS,
}


def _loads_arguments(raw: str) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return value if isinstance(value, dict) else {}


class AnthropicMessagesProtocol:
    """The Anthropic Messages API shape, shared by every provider that speaks it."""

    @property
    def path(self) -> str:
        return "/messages"

    # ------------------------------------------------------------------
    # Request encoding
    # ------------------------------------------------------------------

    def build_request_body(self, request: Request) -> dict[str, Any]:
        system_parts: list[str] = []
        api_messages: list[dict[str, Any]] = []

        for msg in request.messages:
            if msg.role == Role.SYSTEM:
                if msg.text:
                    system_parts.append(msg.text)
                continue
            # Tool results travel inside a user turn.
            role = "assistant" if msg.role == Role.ASSISTANT else "user"
            blocks = self._content_blocks(msg)
            # The API requires strict user/assistant alternation.
            if api_messages and api_messages[-1]["role"] == role:
                api_messages[-1]["content"].extend(blocks)
            else:
                api_messages.append({"role": role, "content": blocks})

        body: dict[str, Any] = {
            "model": request.model,
            "max_tokens": request.max_tokens or max_output_tokens(request.model),
            "messages": api_messages,
        }
        if system_parts:
            body["system"] = "\n\n".join(system_parts)
        if request.temperature is not None:
            body["temperature"] = request.temperature
        if request.stop_sequences:
            body["stop_sequences"] = list(request.stop_sequences)
        if request.tools:
            body["tools"] = [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "input_schema": tool.parameters or {"type": "object", "properties": {}},
                }
                for tool in request.tools
            ]
        return body

    def _content_blocks(self, msg: Message) -> list[dict[str, Any]]:
        blocks = [self._tool_result_block(result) for result in msg.tool_results]
        blocks.extend(self._image_block(image) for image in msg.images)
        if msg.text or not (blocks or msg.tool_calls):
            blocks.append({"type": "text", "text": msg.text})
        blocks.extend(self._tool_use_block(call) for call in msg.tool_calls)
        return blocks

    def _tool_use_block(self, call: ToolCall) -> dict[str, Any]:
        arguments = call.arguments
        if not arguments and call.raw_arguments:
            arguments = _loads_arguments(call.raw_arguments)
        return {
            "type": "tool_use",
            "id": call.id,
            "name": call.name,
            "input": arguments,
        }

    def _tool_result_block(self, result: ToolResult) -> dict[str, Any]:
        content = result.content if isinstance(result.content, str) else json.dumps(result.content)
        return {
            "type": "tool_result",
            "tool_use_id": result.tool_call_id,
            "content": content,
            "is_error": result.is_error,
        }

    def _image_block(self, image: ImageInput) -> dict[str, Any]:
        if image.data is not None:
            source = {
                "type": "base64",
                "media_type": image.media_type or "image/png",
                "data": image.data,
            }
        else:
            source = {"type": "url", "url": image.url or ""}
        return {"type": "image", "source": source}

    # ------------------------------------------------------------------
    # Response decoding
    # ------------------------------------------------------------------

    def parse_response(self, raw: dict[str, Any], provider: str) -> Response:
        texts: list[str] = []
        tool_calls: list[ToolCall] = []
        for block in raw.get("content") or []:
            btype = block.get("type")
            if btype == "text":
                texts.append(block.get("text", ""))
            elif btype == "tool_use":
                arguments = block.get("input") or {}
                tool_calls.append(
                    ToolCall(
                        id=block.get("id", ""),
                        name=block.get("name", ""),
                        arguments=arguments,
                        raw_arguments=json.dumps(arguments),
                    )
                )

        return Response(
            id=raw.get("id", ""),
            model=raw.get("model", ""),
            provider=provider,
            text="".join(texts),
            tool_calls=tuple(tool_calls),
            finish_reason=self.map_finish_reason(raw.get("stop_reason") or ""),
            usage=self._usage(raw.get("usage") or {}),
            raw=raw,
        )

    def map_finish_reason(self, stop_reason: str) -> FinishReason:
        return _STOP_REASONS.get(stop_reason, FinishReason.OTHER)

    def _usage(self, usage: dict[str, Any]) -> Usage:
        return Usage(
            input_tokens=usage.get("input_tokens", 0) or 0,
            output_tokens=usage.get("output_tokens", 0) or 0,
        )

    def parse_stream(self, lines: Iterable[str], provider: str) -> Iterator[StreamEvent]:
        """Translate Messages API SSE lines into :class:`StreamEvent` objects."""
        block_type: str | None = None
        tool_id = ""
        tool_name = ""
        tool_args: list[str] = []
        usage: dict[str, Any] = {}
        stop_reason = ""

        for sse in parse_sse_lines(lines):
            if sse.event == "ping":
                continue
            try:
                data = json.loads(sse.data)
            except json.JSONDecodeError:
                continue
            if not isinstance(data, dict):
                continue
            event_type = data.get("type", sse.event) if sse.event == "message" else sse.event

            if event_type == "message_start":
                usage.update(data.get("message", {}).get("usage") or {})
                yield StreamEvent(type=StreamEventType.STREAM_START, raw=data)

            elif event_type == "content_block_start":
                block = data.get("content_block", {})
                block_type = block.get("type")
                if block_type == "tool_use":
                    tool_id = block.get("id", "")
                    tool_name = block.get("name", "")
                    tool_args = []
                    yield StreamEvent(
                        type=StreamEventType.TOOL_CALL_START,
                        tool_call=ToolCall(id=tool_id, name=tool_name),
                        raw=data,
                    )

            elif event_type == "content_block_delta":
                delta = data.get("delta", {})
                if delta.get("type") == "text_delta":
                    yield StreamEvent(
                        type=StreamEventType.TEXT_DELTA,
                        delta=delta.get("text", ""),
                        raw=data,
                    )
                elif delta.get("type") == "input_json_delta":
                    tool_args.append(delta.get("partial_json", ""))

            elif event_type == "content_block_stop":
                if block_type == "tool_use":
                    raw_arguments = "".join(tool_args)
                    yield StreamEvent(
                        type=StreamEventType.TOOL_CALL_END,
                        tool_call=ToolCall(
                            id=tool_id,
                            name=tool_name,
                            arguments=_loads_arguments(raw_arguments),
                            raw_arguments=raw_arguments,
                        ),
                        raw=data,
                    )
                    tool_args = []
                block_type = None

            elif event_type == "message_delta":
                stop_reason = data.get("delta", {}).get("stop_reason") or stop_reason
                usage.update(data.get("usage") or {})

            elif event_type == "message_stop":
                yield StreamEvent(
                    type=StreamEventType.FINISH,
                    finish_reason=self.map_finish_reason(stop_reason),
                    usage=self._usage(usage),
                    raw=data,
                )

            elif event_type == "error":
                error = data.get("error", data)
                message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
                yield StreamEvent(
                    type=StreamEventType.ERROR,
                    error=StreamError(f"{provider} stream error: {message}"),
                    raw=data,
                )
