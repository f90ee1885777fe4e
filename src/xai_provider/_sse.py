"""Server-Sent Events parser."""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class SSEEvent:
    event: str = "message"
    data: str = ""


def parse_sse_lines(lines: Iterable[str]) -> Iterator[SSEEvent]:
    """Group raw SSE lines into events.

    Comment lines (``:``) are skipped, a blank line dispatches the pending
    event, and multiple ``data`` lines are joined with newlines. Fields
    other than ``event`` and ``data`` are ignored.
    """
    event_name = "message"
    data_parts: list[str] = []

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if line.startswith(":"):
            continue
        if not line:
            if data_parts:
                yield SSEEvent(event=event_name, data="\n".join(data_parts))
            event_name = "message"
            data_parts = []
            continue

        name, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if name == "event":
            event_name = value
        elif name == "data":
            data_parts.append(value)

    if data_parts:
        yield SSEEvent(event=event_name, data="\n".join(data_parts))
