"""Streaming event types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from xai_provider.types.enums import FinishReason, StreamEventType
from xai_provider.types.response import ToolCall, Usage


@dataclass(frozen=True)
class StreamEvent:
    """A single event emitted during streaming."""

    type: StreamEventType
    delta: str | None = None
    tool_call: ToolCall | None = None
    finish_reason: FinishReason | None = None
    usage: Usage | None = None
    error: Exception | None = field(default=None, compare=False, hash=False)
    raw: dict[str, Any] | None = field(default=None, compare=False, hash=False)
