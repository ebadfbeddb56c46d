"""Evaluation errors.

The evaluator itself never raises: states outside the three-valued set
are treated as reject. These errors exist for callers that want strict
input checking before evaluation.
"""

from __future__ import annotations

from border_compliance.domain.exceptions import BorderComplianceError


class EvaluationInconsistencyError(BorderComplianceError):
    """A domain carries a state outside {valid, hold, reject}.

    Attributes:
        domain: Domain whose state is inconsistent.
        state: The offending state value.
    """

    def __init__(self, domain: str, state: object) -> None:
        self.domain = domain
        self.state = state
        super().__init__(
            f"Domain '{domain}' has state {state!r}, expected one of valid, hold, reject"
        )
