"""JSON event source.

Reads canonical events from a file path, or from standard input when the
path is "-". The input is either a JSON array of event objects or a
single event object. Empty or malformed input is rejected before it
reaches the core.
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from border_compliance.domain.errors.input import EventSourceError

STDIN_SOURCE = "-"


class CanonicalEventRecord(BaseModel):
    """Envelope check for one canonical event.

    Only the shape is checked here; the semantic engine owns structural
    and schema validation of the event content.
    """

    model_config = ConfigDict(extra="allow")

    event_id: str | None = None
    domain: str | None = None
    attributes: dict[str, Any] | None = None


_EVENTS_ADAPTER = TypeAdapter(list[CanonicalEventRecord])


def parse_events(raw: str, source: str = STDIN_SOURCE) -> list[dict[str, Any]]:
    """Parse and validate raw JSON text into event dictionaries.

    Args:
        raw: JSON text.
        source: Source name used in error messages.

    Returns:
        Non-empty list of events, in input order, as plain dicts.

    Raises:
        EventSourceError: If the input is empty, not JSON, or not an
            event object / array of event objects.
    """
    if not raw.strip():
        raise EventSourceError(source, "Input file is empty.")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise EventSourceError(source, f"Invalid JSON: {exc.msg}") from exc

    items = parsed if isinstance(parsed, list) else [parsed]
    if not items:
        raise EventSourceError(source, "Input JSON array is empty.")

    try:
        records = _EVENTS_ADAPTER.validate_python(items)
    except ValidationError as exc:
        raise EventSourceError(
            source, f"Malformed event input: {exc.error_count()} validation error(s)"
        ) from exc

    return [record.model_dump(exclude_unset=True) for record in records]


class JsonEventSource:
    """Event source backed by a JSON file or standard input."""

    def __init__(self, path: str | Path) -> None:
        self.source = str(path)

    async def load_events(self) -> list[dict[str, Any]]:
        """Read and parse the source; re-read on every call."""
        raw = await asyncio.to_thread(self._read)
        return parse_events(raw, self.source)

    def _read(self) -> str:
        if self.source == STDIN_SOURCE:
            return sys.stdin.read()
        try:
            return Path(self.source).read_text(encoding="utf-8")
        except OSError as exc:
            raise EventSourceError(self.source, f"Failed to read file: {exc.strerror}") from exc
