"""xAI provider: model capability registry and connection adapter."""
from __future__ import annotations

# Types
from xai_provider.types.enums import FinishReason, ModelFamily, Role, StreamEventType
from xai_provider.types.descriptor import Modalities, ModelDescriptor, TokenPrice
from xai_provider.types.messages import ImageInput, Message, ToolResult
from xai_provider.types.request import Request, Tool
from xai_provider.types.response import Response, ToolCall, Usage
from xai_provider.types.streaming import StreamEvent

# Errors
from xai_provider.errors import (
    XAIError,
    ProviderError,
    AuthenticationError,
    AccessDeniedError,
    NotFoundError,
    InvalidRequestError,
    ContextLengthError,
    RateLimitError,
    ServerError,
    RequestTimeoutError,
    NetworkError,
    StreamError,
    ConfigurationError,
)

# Configuration
from xai_provider.config import AdapterTimeout, XAIConfig, validate_configuration

# Registry
from xai_provider.capabilities import (
    build_descriptor,
    capability_tags,
    context_window,
    display_name,
    estimate_cost,
    family_of,
    max_output_tokens,
    modalities,
    pricing,
    supports_functions,
    supports_json_mode,
    supports_vision,
)

# Catalog
from xai_provider.catalog import KNOWN_MODELS, get_latest_model, get_model_info

# Provider and transport
from xai_provider.protocol import AnthropicMessagesProtocol, RequestBuilder, ResponseParser
from xai_provider.provider import XAIProvider, xai
from xai_provider.adapter import XAIAdapter

__all__ = [
    # Types
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
    # Errors
    "XAIError",
    "ProviderError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "InvalidRequestError",
    "ContextLengthError",
    "RateLimitError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    "StreamError",
    "ConfigurationError",
    # Configuration
    "AdapterTimeout",
    "XAIConfig",
    "validate_configuration",
    # Registry
    "build_descriptor",
    "capability_tags",
    "context_window",
    "display_name",
    "estimate_cost",
    "family_of",
    "max_output_tokens",
    "modalities",
    "pricing",
    "supports_functions",
    "supports_json_mode",
    "supports_vision",
    # Catalog
    "KNOWN_MODELS",
    "get_latest_model",
    "get_model_info",
    # Provider and transport
    "AnthropicMessagesProtocol",
    "RequestBuilder",
    "ResponseParser",
    "XAIProvider",
    "xai",
    "XAIAdapter",
]
