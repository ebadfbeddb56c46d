"""Unit tests for BorderVerificationService."""

import pytest

from border_compliance.application.services import BorderVerificationService
from border_compliance.domain.errors import (
    VerificationFailureError,
    VerifierUnavailableError,
)
from border_compliance.domain.models import (
    CargoManifestResult,
    DriverIdentityResult,
    VehicleCertificateResult,
)
from border_compliance.infrastructure.stubs import (
    CargoManifestVerifierStub,
    IdentityVerifierStub,
    VehicleCertificateVerifierStub,
)

VEHICLE_OBJECT = "0xvehicle"
CARGO_OBJECT = "0xcargo"


@pytest.fixture
def service(
    identity_verifier: IdentityVerifierStub,
    vehicle_verifier: VehicleCertificateVerifierStub,
    cargo_verifier: CargoManifestVerifierStub,
) -> BorderVerificationService:
    return BorderVerificationService(
        identity_verifier,
        vehicle_verifier,
        cargo_verifier,
        vehicle_object_id=VEHICLE_OBJECT,
        cargo_object_id=CARGO_OBJECT,
    )


class TestVerify:
    async def test_all_domains_pass(
        self,
        service: BorderVerificationService,
        vehicle_verifier: VehicleCertificateVerifierStub,
        cargo_verifier: CargoManifestVerifierStub,
    ) -> None:
        summary = await service.verify()

        assert summary.identity.verified is True
        assert summary.plate == "TRUCK-BorderTest"
        assert summary.cargo.manifest_id == "MANIFEST-0001"
        assert vehicle_verifier.object_ids == [VEHICLE_OBJECT]
        assert cargo_verifier.object_ids == [CARGO_OBJECT]

    async def test_identity_not_verified(
        self,
        service: BorderVerificationService,
        identity_verifier: IdentityVerifierStub,
        vehicle_verifier: VehicleCertificateVerifierStub,
    ) -> None:
        identity_verifier.result = DriverIdentityResult(verified=False, driver_did="")

        with pytest.raises(VerificationFailureError) as exc_info:
            await service.verify()

        assert exc_info.value.domain == "identity"
        assert exc_info.value.reason == "driver VP is not valid"
        assert vehicle_verifier.calls == 0

    async def test_vehicle_revoked_stops_before_cargo(
        self,
        service: BorderVerificationService,
        vehicle_verifier: VehicleCertificateVerifierStub,
        cargo_verifier: CargoManifestVerifierStub,
    ) -> None:
        vehicle_verifier.result = VehicleCertificateResult(
            valid=False, plate="TRUCK-1", vehicle_class="N3", reason="certificate_revoked"
        )

        with pytest.raises(VerificationFailureError) as exc_info:
            await service.verify()

        assert exc_info.value.domain == "token"
        assert exc_info.value.reason == "certificate_revoked"
        assert cargo_verifier.calls == 0

    async def test_cargo_failure(
        self, service: BorderVerificationService, cargo_verifier: CargoManifestVerifierStub
    ) -> None:
        cargo_verifier.result = CargoManifestResult(
            valid=False, manifest_id="M-1", reason="seal_broken"
        )

        with pytest.raises(
            VerificationFailureError, match="supply verification failed: seal_broken"
        ):
            await service.verify()

    async def test_invalid_without_reason_gets_default(
        self, service: BorderVerificationService, cargo_verifier: CargoManifestVerifierStub
    ) -> None:
        cargo_verifier.result = CargoManifestResult(valid=False, manifest_id="")

        with pytest.raises(VerificationFailureError) as exc_info:
            await service.verify()

        assert exc_info.value.reason == "cargo manifest is not valid"

    async def test_unreachable_verifier(
        self, service: BorderVerificationService, identity_verifier: IdentityVerifierStub
    ) -> None:
        identity_verifier.set_failure(True, reason="connection refused")

        with pytest.raises(VerifierUnavailableError) as exc_info:
            await service.verify()

        assert exc_info.value.domain == "identity"
        assert "connection refused" in str(exc_info.value)
