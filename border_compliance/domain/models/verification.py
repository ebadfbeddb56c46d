"""Results reported by the three external verifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class DriverIdentityResult:
    """Outcome of verifying the driver's verifiable presentation."""

    verified: bool
    driver_did: str
    credential_count: int = 0


@dataclass(frozen=True)
class VehicleCertificateResult:
    """Outcome of checking the vehicle certificate on the ledger.

    Only public identifiers are read; the owner DID is never accessed.
    """

    valid: bool
    plate: str
    vehicle_class: str
    reason: str | None = None


@dataclass(frozen=True)
class CargoManifestResult:
    """Outcome of checking the cargo manifest on the ledger.

    Only declared states are read, never commercial content.
    """

    valid: bool
    manifest_id: str
    reason: str | None = None


@dataclass(frozen=True)
class VerificationSummary:
    """All three domains verified successfully for one cycle."""

    identity: DriverIdentityResult
    vehicle: VehicleCertificateResult
    cargo: CargoManifestResult

    @property
    def plate(self) -> str:
        return self.vehicle.plate

    def to_dict(self) -> dict[str, Any]:
        return {
            "driver_did": self.identity.driver_did,
            "credential_count": self.identity.credential_count,
            "plate": self.vehicle.plate,
            "vehicle_class": self.vehicle.vehicle_class,
            "manifest_id": self.cargo.manifest_id,
        }
