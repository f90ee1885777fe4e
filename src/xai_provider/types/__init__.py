"""Type definitions for the xAI provider."""
from __future__ import annotations

from xai_provider.types.enums import FinishReason, ModelFamily, Role, StreamEventType
from xai_provider.types.descriptor import Modalities, ModelDescriptor, TokenPrice
from xai_provider.types.messages import ImageInput, Message, ToolResult
from xai_provider.types.request import Request, Tool
from xai_provider.types.response import Response, ToolCall, Usage
from xai_provider.types.streaming import StreamEvent

__all__ = [
    "FinishReason",
    "ModelFamily",
    "Role",
    "StreamEventType",
    "Modalities",
    "ModelDescriptor",
    "TokenPrice",
    "ImageInput",
    "Message",
    "ToolResult",
    "Request",
    "Tool",
    "Response",
    "ToolCall",
    "Usage",
    "StreamEvent",
]
