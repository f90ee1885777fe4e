"""Response types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from xai_provider.types.enums import FinishReason


@dataclass(frozen=True)
class ToolCall:
    """A tool call made by the model."""

    id: str
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)
    raw_arguments: str | None = None


@dataclass(frozen=True)
class Usage:
    """Token usage statistics."""

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass(frozen=True)
class Response:
    """A parsed model response."""

    id: str = ""
    model: str = ""
    provider: str = ""
    text: str = ""
    tool_calls: tuple[ToolCall, ...] = ()
    finish_reason: FinishReason = FinishReason.STOP
    usage: Usage = field(default_factory=Usage)
    raw: dict[str, Any] | None = field(default=None, compare=False, hash=False)
