"""Driver identity verifier port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from border_compliance.domain.models.verification import DriverIdentityResult


class IdentityVerifierProtocol(ABC):
    """Verifies the driver's verifiable presentation."""

    @abstractmethod
    async def verify_driver(self) -> DriverIdentityResult:
        """Verify the driver presenting at the checkpoint.

        Returns:
            DriverIdentityResult; verified=False means the presentation
            is not valid.

        Raises:
            VerifierUnavailableError: If the identity service is unreachable.
        """
        ...
