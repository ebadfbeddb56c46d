"""Compliance anchoring through a notarization gateway.

The gateway owns the ledger keys and transaction mechanics. One proof is
one request:

    POST /v1/proofs
    {"subject_ref", "profile_id", "result", "bundle_hash"}

    -> {"transaction_id", "anchored_at", "status", "network"}

There is no retry. A timeout leaves the outcome unknown; callers treat
it as a failure.
"""

from __future__ import annotations

from typing import Any

import httpx

from border_compliance.application.ports.anchor_adapter import (
    ComplianceAnchorAdapterProtocol,
)
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.errors.anchoring import AnchoringError
from border_compliance.domain.models.anchor_record import (
    AnchorRecord,
    ComplianceAnchorInput,
)

PROOFS_PATH = "/v1/proofs"


class HttpNotarizationAnchorAdapter(ComplianceAnchorAdapterProtocol, LoggingMixin):
    """Submits compliance proofs to the notarization gateway."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )
        self._init_logger(component="anchoring")

    async def __aenter__(self) -> HttpNotarizationAnchorAdapter:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def submit_proof(self, anchor_input: ComplianceAnchorInput) -> AnchorRecord:
        log = self._log_operation("submit_proof", subject_ref=anchor_input.subject_ref)
        try:
            response = await self._client.post(PROOFS_PATH, json=anchor_input.to_dict())
            response.raise_for_status()
            data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as exc:
            log.error("proof_rejected", status_code=exc.response.status_code)
            raise AnchoringError(
                f"Gateway rejected proof: HTTP {exc.response.status_code}",
                subject_ref=anchor_input.subject_ref,
                detail=exc.response.text or None,
            ) from exc
        except httpx.HTTPError as exc:
            log.error("gateway_unreachable", error=str(exc))
            raise AnchoringError(
                f"Gateway unreachable at {self.base_url}",
                subject_ref=anchor_input.subject_ref,
                detail=str(exc),
            ) from exc
        except ValueError as exc:
            raise AnchoringError(
                "Gateway returned invalid JSON",
                subject_ref=anchor_input.subject_ref,
            ) from exc

        try:
            return AnchorRecord.from_input(
                anchor_input,
                transaction_id=str(data["transaction_id"]),
                anchored_at=str(data["anchored_at"]),
                status=str(data.get("status", "confirmed")),
                network=str(data.get("network", "unknown")),
            )
        except KeyError as exc:
            raise AnchoringError(
                f"Gateway response missing {exc.args[0]!r}",
                subject_ref=anchor_input.subject_ref,
            ) from exc
