"""Authenticator port for the override authorization gate.

The state machine only asks whether a credential is acceptable. Wiring
to a real identity/authorization subsystem happens behind this port
without touching the machine.
"""

from __future__ import annotations

from typing import Protocol


class AuthenticatorProtocol(Protocol):
    """Decides whether an operator credential authorizes an override."""

    def verify(self, credential: str | None) -> bool:
        """Return True if the credential authorizes the override.

        Args:
            credential: Secret entered by the operator, None if none given.

        Returns:
            True if authorized, False otherwise. Never raises for a bad
            credential.
        """
        ...
