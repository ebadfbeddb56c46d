"""Shared-secret authenticator for manual overrides.

WARNING: placeholder control, not a security boundary. It compares the
operator's input with one configured secret. Replace it with an
authenticator wired to a real identity/authorization subsystem.
"""

from __future__ import annotations

import hmac


class SharedSecretAuthenticator:
    """Accepts exactly one configured secret (constant-time compare)."""

    def __init__(self, expected_secret: str) -> None:
        if not expected_secret:
            raise ValueError("expected_secret must not be empty")
        self._expected = expected_secret.encode("utf-8")

    def verify(self, credential: str | None) -> bool:
        if credential is None:
            return False
        return hmac.compare_digest(credential.strip().encode("utf-8"), self._expected)
