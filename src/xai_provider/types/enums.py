"""Enumeration types for the xAI provider."""
from __future__ import annotations

from enum import StrEnum


class ModelFamily(StrEnum):
    """Price tier a model identifier belongs to."""

    GROK_4 = "grok_4"
    GROK_3 = "grok_3"
    GROK_3_MINI = "grok_3_mini"
    GROK_2 = "grok_2"
    GROK_2_VISION = "grok_2_vision"
    GROK_VISION_BETA = "grok_vision_beta"
    UNKNOWN = "unknown"


class Role(StrEnum):
    """Role of a message participant."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class FinishReason(StrEnum):
    """Why the model stopped generating."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALLS = "tool_calls"
    OTHER = "other"


class StreamEventType(StrEnum):
    """Types of events emitted during streaming."""

    STREAM_START = "stream_start"
    TEXT_DELTA = "text_delta"
    TOOL_CALL_START = "tool_call_start"
    TOOL_CALL_END = "tool_call_end"
    FINISH = "finish"
    ERROR = "error"
