"""Request types."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from xai_provider.types.messages import Message


@dataclass(frozen=True)
class Tool:
    """Definition of a tool that a model can call."""

    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class Request:
    """A chat request addressed to one model."""

    model: str
    messages: tuple[Message, ...] = ()
    max_tokens: int | None = None
    temperature: float | None = None
    stop_sequences: tuple[str, ...] = ()
    tools: tuple[Tool, ...] = ()

    @property
    def has_images(self) -> bool:
        return any(msg.images for msg in self.messages)
