"""Verification of the three trust domains.

Runs driver identity, vehicle certificate and cargo manifest checks in
that order. The first failing domain aborts the cycle with a
VerificationFailureError; later verifiers are not called.
"""

from __future__ import annotations

from border_compliance.application.ports.cargo_manifest_verifier import (
    CargoManifestVerifierProtocol,
)
from border_compliance.application.ports.identity_verifier import (
    IdentityVerifierProtocol,
)
from border_compliance.application.ports.vehicle_certificate_verifier import (
    VehicleCertificateVerifierProtocol,
)
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.errors.verification import VerificationFailureError
from border_compliance.domain.models.compliance_state import (
    IDENTITY_DOMAIN,
    SUPPLY_DOMAIN,
    TOKEN_DOMAIN,
)
from border_compliance.domain.models.verification import (
    CargoManifestResult,
    DriverIdentityResult,
    VehicleCertificateResult,
    VerificationSummary,
)


class BorderVerificationService(LoggingMixin):
    """Fail-fast verification across identity, vehicle and cargo."""

    def __init__(
        self,
        identity_verifier: IdentityVerifierProtocol,
        vehicle_verifier: VehicleCertificateVerifierProtocol,
        cargo_verifier: CargoManifestVerifierProtocol,
        *,
        vehicle_object_id: str,
        cargo_object_id: str,
    ) -> None:
        self._identity = identity_verifier
        self._vehicle = vehicle_verifier
        self._cargo = cargo_verifier
        self._vehicle_object_id = vehicle_object_id
        self._cargo_object_id = cargo_object_id
        self._init_logger(component="verification")

    async def verify(self) -> VerificationSummary:
        """Verify all three domains.

        Returns:
            VerificationSummary when every domain verified.

        Raises:
            VerificationFailureError: On the first invalid or unreachable
                domain.
        """
        identity = await self.verify_identity()
        vehicle = await self.verify_vehicle()
        cargo = await self.verify_cargo()
        return VerificationSummary(identity=identity, vehicle=vehicle, cargo=cargo)

    async def verify_identity(self) -> DriverIdentityResult:
        log = self._log_operation("verify_identity")
        result = await self._identity.verify_driver()
        if not result.verified:
            log.warning("verification_failed", domain=IDENTITY_DOMAIN)
            raise VerificationFailureError(IDENTITY_DOMAIN, "driver VP is not valid")
        log.info("verification_passed", driver_did=result.driver_did)
        return result

    async def verify_vehicle(self) -> VehicleCertificateResult:
        log = self._log_operation("verify_vehicle", object_id=self._vehicle_object_id)
        result = await self._vehicle.verify(self._vehicle_object_id)
        if not result.valid:
            reason = result.reason or "vehicle certificate is not valid"
            log.warning("verification_failed", domain=TOKEN_DOMAIN, reason=reason)
            raise VerificationFailureError(TOKEN_DOMAIN, reason)
        log.info("verification_passed", plate=result.plate)
        return result

    async def verify_cargo(self) -> CargoManifestResult:
        log = self._log_operation("verify_cargo", object_id=self._cargo_object_id)
        result = await self._cargo.verify(self._cargo_object_id)
        if not result.valid:
            reason = result.reason or "cargo manifest is not valid"
            log.warning("verification_failed", domain=SUPPLY_DOMAIN, reason=reason)
            raise VerificationFailureError(SUPPLY_DOMAIN, reason)
        log.info("verification_passed", manifest_id=result.manifest_id)
        return result
