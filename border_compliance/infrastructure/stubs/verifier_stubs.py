"""In-memory verifier stubs for the three trust domains.

WARNING: These stubs are NOT for production use. They answer from
configured results so the workflow can run without the identity
service or a ledger node.
"""

from __future__ import annotations

import warnings

from border_compliance.application.ports.cargo_manifest_verifier import (
    CargoManifestVerifierProtocol,
)
from border_compliance.application.ports.identity_verifier import (
    IdentityVerifierProtocol,
)
from border_compliance.application.ports.vehicle_certificate_verifier import (
    VehicleCertificateVerifierProtocol,
)
from border_compliance.domain.errors.verification import VerifierUnavailableError
from border_compliance.domain.models.compliance_state import (
    IDENTITY_DOMAIN,
    SUPPLY_DOMAIN,
    TOKEN_DOMAIN,
)
from border_compliance.domain.models.verification import (
    CargoManifestResult,
    DriverIdentityResult,
    VehicleCertificateResult,
)

DEV_MODE_WARNING = "[DEV MODE] verifier stubs in use - NOT FOR PRODUCTION"

STUB_ENDPOINT = "stub://"


class _FailureControl:
    """Failure injection shared by the verifier stubs."""

    DOMAIN = ""

    def __init__(self) -> None:
        self._should_fail = False
        self._failure_reason: str | None = None
        self.calls = 0

    def set_failure(self, should_fail: bool, reason: str | None = None) -> None:
        """Make the next calls raise VerifierUnavailableError."""
        self._should_fail = should_fail
        self._failure_reason = reason

    def _record_call(self) -> None:
        self.calls += 1
        if self._should_fail:
            raise VerifierUnavailableError(
                self.DOMAIN,
                STUB_ENDPOINT,
                self._failure_reason or "Simulated verifier failure",
            )


class IdentityVerifierStub(_FailureControl, IdentityVerifierProtocol):
    """Returns a configured driver identity result."""

    DOMAIN = IDENTITY_DOMAIN

    def __init__(
        self,
        result: DriverIdentityResult | None = None,
        warn_on_init: bool = True,
    ) -> None:
        super().__init__()
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)
        self.result = result or DriverIdentityResult(
            verified=True,
            driver_did="did:iota:testnet:0xstubdriver",
            credential_count=1,
        )

    async def verify_driver(self) -> DriverIdentityResult:
        self._record_call()
        return self.result


class VehicleCertificateVerifierStub(_FailureControl, VehicleCertificateVerifierProtocol):
    """Returns a configured vehicle certificate result."""

    DOMAIN = TOKEN_DOMAIN

    def __init__(
        self,
        result: VehicleCertificateResult | None = None,
        warn_on_init: bool = True,
    ) -> None:
        super().__init__()
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)
        self.result = result or VehicleCertificateResult(
            valid=True, plate="TRUCK-BorderTest", vehicle_class="N3"
        )
        self.object_ids: list[str] = []

    async def verify(self, object_id: str) -> VehicleCertificateResult:
        self._record_call()
        self.object_ids.append(object_id)
        return self.result


class CargoManifestVerifierStub(_FailureControl, CargoManifestVerifierProtocol):
    """Returns a configured cargo manifest result."""

    DOMAIN = SUPPLY_DOMAIN

    def __init__(
        self,
        result: CargoManifestResult | None = None,
        warn_on_init: bool = True,
    ) -> None:
        super().__init__()
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)
        self.result = result or CargoManifestResult(valid=True, manifest_id="MANIFEST-0001")
        self.object_ids: list[str] = []

    async def verify(self, object_id: str) -> CargoManifestResult:
        self._record_call()
        self.object_ids.append(object_id)
        return self.result
