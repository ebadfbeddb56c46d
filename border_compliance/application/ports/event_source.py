"""Event source port.

Supplies the ordered canonical events for one evaluation cycle. Each
call re-reads the source so a restarted cycle sees a fresh registration.
"""

from __future__ import annotations

from typing import Any, Protocol


class EventSourceProtocol(Protocol):
    """Loads canonical events for a cycle."""

    async def load_events(self) -> list[dict[str, Any]]:
        """Return the ordered, non-empty list of canonical events.

        Raises:
            EventSourceError: If the input is empty or malformed.
        """
        ...
