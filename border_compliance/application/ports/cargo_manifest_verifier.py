"""Cargo manifest verifier port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from border_compliance.domain.models.verification import CargoManifestResult


class CargoManifestVerifierProtocol(ABC):
    """Checks a cargo manifest recorded on the ledger."""

    @abstractmethod
    async def verify(self, object_id: str) -> CargoManifestResult:
        """Check the manifest stored under a ledger object id.

        Raises:
            VerifierUnavailableError: If the ledger cannot be queried.
        """
        ...
