"""Message types."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from xai_provider.types.enums import Role
from xai_provider.types.response import ToolCall


@dataclass(frozen=True)
class ImageInput:
    """An image attached to a message, either inline base64 data or a URL."""

    url: str | None = None
    data: str | None = None
    media_type: str | None = None


@dataclass(frozen=True)
class ToolResult:
    """The result of executing a tool, sent back to the model."""

    tool_call_id: str
    content: str | dict[str, Any] | list[Any] = ""
    is_error: bool = False


@dataclass(frozen=True)
class Message:
    """A single message in a conversation."""

    role: Role
    text: str = ""
    images: tuple[ImageInput, ...] = ()
    tool_calls: tuple[ToolCall, ...] = ()
    tool_results: tuple[ToolResult, ...] = ()

    @classmethod
    def system(cls, text: str) -> Message:
        return cls(role=Role.SYSTEM, text=text)

    @classmethod
    def user(cls, text: str, images: tuple[ImageInput, ...] = ()) -> Message:
        return cls(role=Role.USER, text=text, images=images)

    @classmethod
    def assistant(
        cls, text: str = "", tool_calls: Sequence[ToolCall] | None = None
    ) -> Message:
        """Create an assistant message with optional tool calls."""
        return cls(role=Role.ASSISTANT, text=text, tool_calls=tuple(tool_calls or ()))

    @classmethod
    def tool_result(
        cls,
        tool_call_id: str,
        content: str | dict[str, Any] | list[Any],
        is_error: bool = False,
    ) -> Message:
        """Create a message carrying the result of one tool call."""
        return cls(
            role=Role.TOOL,
            tool_results=(ToolResult(tool_call_id=tool_call_id, content=content, is_error=is_error),),
        )
