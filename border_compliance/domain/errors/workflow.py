"""Override workflow errors."""

from __future__ import annotations

from border_compliance.domain.exceptions import BorderComplianceError


class AuthorizationFailedError(BorderComplianceError):
    """Operator credential did not pass the authorization gate.

    The pending transition is aborted and the workflow ends.

    Attributes:
        action: The operator action that required authorization.
    """

    def __init__(self, action: str) -> None:
        self.action = action
        super().__init__(f"Authorization failed for action '{action}'")


class InvalidTransitionError(BorderComplianceError):
    """The requested action is not offered in the current phase.

    Attributes:
        phase: Current workflow phase.
        action: Action that was requested.
    """

    def __init__(self, phase: str, action: str) -> None:
        self.phase = phase
        self.action = action
        super().__init__(f"Action '{action}' is not available in phase '{phase}'")
