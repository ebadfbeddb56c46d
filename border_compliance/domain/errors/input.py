"""Event source and interpretation errors."""

from __future__ import annotations

from border_compliance.domain.exceptions import BorderComplianceError


class EventSourceError(BorderComplianceError):
    """Event input is empty, unreadable or malformed.

    Raised before anything enters the core.

    Attributes:
        source: File path or "-" for standard input.
        message: What was wrong with the input.
    """

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"{source}: {message}")


class InterpretationFailedError(BorderComplianceError):
    """The semantic engine rejected an event.

    Attributes:
        index: 1-based position of the event in the input.
        kind: "structural_fail" or "core_schema_fail".
        errors: Validation errors reported by the engine.
    """

    def __init__(self, index: int, kind: str, errors: tuple[str, ...]) -> None:
        self.index = index
        self.kind = kind
        self.errors = errors
        super().__init__(f"[{index}] {kind}")
