"""Vehicle certificate verifier port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from border_compliance.domain.models.verification import VehicleCertificateResult


class VehicleCertificateVerifierProtocol(ABC):
    """Checks a vehicle certificate recorded on the ledger."""

    @abstractmethod
    async def verify(self, object_id: str) -> VehicleCertificateResult:
        """Check the certificate stored under a ledger object id.

        Raises:
            VerifierUnavailableError: If the ledger cannot be queried.
        """
        ...
