"""Anchoring errors.

An anchoring failure is reported to the operator and never retried.
The already-recorded compliance state is left untouched.
"""

from __future__ import annotations

from border_compliance.domain.exceptions import BorderComplianceError


class AnchoringError(BorderComplianceError):
    """The anchoring adapter failed (network, timeout or chain rejection).

    Attributes:
        subject_ref: Subject the proof was submitted for, if known.
        detail: Adapter-specific failure detail.
    """

    def __init__(
        self, message: str, subject_ref: str | None = None, detail: str | None = None
    ) -> None:
        self.subject_ref = subject_ref
        self.detail = detail
        super().__init__(message)


class AnchoringNotPermittedError(AnchoringError):
    """Anchoring was requested for a state that is never anchored.

    Only automated-valid and manual-hold decisions are anchored.
    """

    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Compliance state '{state}' is never anchored")
