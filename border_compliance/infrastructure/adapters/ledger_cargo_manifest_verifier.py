"""Cargo manifest verification against the ledger.

Reads declared states only. Shipper, consignee, value and any other
commercial content are never accessed.
"""

from __future__ import annotations

import httpx

from border_compliance.application.ports.cargo_manifest_verifier import (
    CargoManifestVerifierProtocol,
)
from border_compliance.domain.errors.verification import VerifierUnavailableError
from border_compliance.domain.models.compliance_state import SUPPLY_DOMAIN
from border_compliance.domain.models.verification import CargoManifestResult
from border_compliance.infrastructure.adapters.ledger_object_reader import (
    LedgerObjectReader,
    MalformedLedgerResponseError,
)

# (field, value that fails the check, reason), checked in order
MANIFEST_CHECKS: tuple[tuple[str, bool, str], ...] = (
    ("active", False, "manifest_revoked"),
    ("temperature_ok", False, "cold_chain_failed"),
    ("seal_intact", False, "seal_broken"),
    ("xray_cleared", False, "xray_failed"),
    ("hazmat", True, "hazmat_detected"),
)


class LedgerCargoManifestVerifier(CargoManifestVerifierProtocol):
    """Checks the declared state flags of a cargo manifest object."""

    def __init__(self, reader: LedgerObjectReader) -> None:
        self._reader = reader

    async def verify(self, object_id: str) -> CargoManifestResult:
        try:
            fields = await self._reader.get_object_fields(object_id)
        except (httpx.HTTPError, MalformedLedgerResponseError) as exc:
            raise VerifierUnavailableError(SUPPLY_DOMAIN, self._reader.rpc_url, str(exc)) from exc

        if fields is None:
            return CargoManifestResult(valid=False, manifest_id="", reason="object_not_found")

        manifest_id = str(fields.get("manifest_id", ""))
        for name, failing_value, reason in MANIFEST_CHECKS:
            if bool(fields.get(name)) is failing_value:
                return CargoManifestResult(valid=False, manifest_id=manifest_id, reason=reason)
        return CargoManifestResult(valid=True, manifest_id=manifest_id)
