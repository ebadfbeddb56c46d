"""Vehicle certificate verification against the ledger.

Reads only the plate, the vehicle class and the active flag. The
owner DID is never accessed.
"""

from __future__ import annotations

import httpx

from border_compliance.application.ports.vehicle_certificate_verifier import (
    VehicleCertificateVerifierProtocol,
)
from border_compliance.domain.errors.verification import VerifierUnavailableError
from border_compliance.domain.models.compliance_state import TOKEN_DOMAIN
from border_compliance.domain.models.verification import VehicleCertificateResult
from border_compliance.infrastructure.adapters.ledger_object_reader import (
    LedgerObjectReader,
    MalformedLedgerResponseError,
)


class LedgerVehicleCertificateVerifier(VehicleCertificateVerifierProtocol):
    """Checks that a vehicle certificate object exists and is active."""

    def __init__(self, reader: LedgerObjectReader) -> None:
        self._reader = reader

    async def verify(self, object_id: str) -> VehicleCertificateResult:
        try:
            fields = await self._reader.get_object_fields(object_id)
        except (httpx.HTTPError, MalformedLedgerResponseError) as exc:
            raise VerifierUnavailableError(TOKEN_DOMAIN, self._reader.rpc_url, str(exc)) from exc

        if fields is None:
            return VehicleCertificateResult(
                valid=False, plate="", vehicle_class="", reason="object_not_found"
            )

        plate = str(fields.get("plate", ""))
        vehicle_class = str(fields.get("vehicle_class", ""))
        if not fields.get("active"):
            return VehicleCertificateResult(
                valid=False,
                plate=plate,
                vehicle_class=vehicle_class,
                reason="certificate_revoked",
            )
        return VehicleCertificateResult(valid=True, plate=plate, vehicle_class=vehicle_class)
