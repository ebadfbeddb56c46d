"""Verification errors for the three trust domains.

A verification failure aborts the current cycle before aggregation
begins. There is no partial verdict.
"""

from __future__ import annotations

from border_compliance.domain.exceptions import BorderComplianceError


class VerificationFailureError(BorderComplianceError):
    """A verifier reported an invalid or unreachable result.

    Attributes:
        domain: Trust domain that failed (identity, token, supply).
        reason: Human-readable reason reported by the verifier.
    """

    def __init__(self, domain: str, reason: str) -> None:
        """Initialize the error.

        Args:
            domain: Trust domain that failed.
            reason: Reason reported by the verifier.
        """
        self.domain = domain
        self.reason = reason
        super().__init__(f"{domain} verification failed: {reason}")


class VerifierUnavailableError(VerificationFailureError):
    """The verifier could not be reached or answered with an error status."""

    def __init__(self, domain: str, endpoint: str, detail: str) -> None:
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(domain, f"service unreachable at {endpoint} ({detail})")
