"""Compliance proof anchoring service.

Builds the canonical compliance payload, derives its 256-bit bundle
hash and submits the proof to the anchoring adapter.

Canonical form:
    {"bundle_refs": [...], "result": bool, "state": str,
     "manual_override": bool, "timestamp": <ms>}

Keys appear in exactly that order, with compact separators and UTF-8
encoding, so the same payload always hashes to the same digest.

Only automated-valid and manual-hold decisions are anchored. Adapter
failures propagate unchanged: no retry, no backoff, no partial commit.

Usage:
    service = ProofAnchoringService(adapter, time_authority)
    record = await service.anchor(verdict.bundle_refs, request, plate="ABC-123")
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Sequence

import blake3

from border_compliance.application.ports.anchor_adapter import (
    ComplianceAnchorAdapterProtocol,
)
from border_compliance.application.ports.time_authority import TimeAuthorityProtocol
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.errors.anchoring import AnchoringNotPermittedError
from border_compliance.domain.models.anchor_record import (
    AnchorRecord,
    AnchorRequest,
    ComplianceAnchorInput,
    CompliancePayload,
    DigestAlgorithm,
    vehicle_subject_ref,
)
from border_compliance.domain.models.compliance_state import ComplianceState

DEFAULT_PROFILE_ID = "bordertest-v1"

# States that may ever be anchored
ANCHORABLE_STATES = frozenset({ComplianceState.VALID.value, ComplianceState.HOLD.value})


def canonicalize(payload: CompliancePayload) -> bytes:
    """Serialize a payload deterministically to UTF-8 bytes."""
    return json.dumps(
        payload.to_dict(),
        separators=(",", ":"),
        ensure_ascii=False,
    ).encode("utf-8")


def compute_bundle_hash(
    payload: CompliancePayload,
    algorithm: DigestAlgorithm = DigestAlgorithm.SHA256,
) -> str:
    """Compute the hex digest of the canonical payload.

    Args:
        payload: The compliance payload.
        algorithm: SHA-256 (default) or BLAKE3; both yield 32 bytes.

    Returns:
        64-character lowercase hex digest.
    """
    data = canonicalize(payload)
    if algorithm is DigestAlgorithm.BLAKE3:
        return blake3.blake3(data).hexdigest()
    return hashlib.sha256(data).hexdigest()


class ProofAnchoringService(LoggingMixin):
    """Hashes and submits compliance proofs.

    Attributes:
        profile_id: Compliance profile the proofs are filed under.
        algorithm: Digest algorithm for the bundle hash.
    """

    def __init__(
        self,
        adapter: ComplianceAnchorAdapterProtocol,
        time_authority: TimeAuthorityProtocol,
        *,
        profile_id: str = DEFAULT_PROFILE_ID,
        algorithm: DigestAlgorithm = DigestAlgorithm.SHA256,
    ) -> None:
        self._adapter = adapter
        self._time = time_authority
        self.profile_id = profile_id
        self.algorithm = algorithm
        self._init_logger(component="anchoring")

    def build_payload(
        self, bundle_refs: Sequence[str], request: AnchorRequest
    ) -> CompliancePayload:
        """Build the canonical payload, stamped with the current time in ms."""
        return CompliancePayload(
            bundle_refs=tuple(bundle_refs),
            result=request.result,
            state=request.state,
            manual_override=request.manual_override,
            timestamp=self._time.epoch_millis(),
        )

    def build_input(self, payload: CompliancePayload, plate: str) -> ComplianceAnchorInput:
        """Build the adapter input for a payload and vehicle plate."""
        return ComplianceAnchorInput(
            subject_ref=vehicle_subject_ref(plate),
            profile_id=self.profile_id,
            result=payload.result,
            bundle_hash=compute_bundle_hash(payload, self.algorithm),
        )

    async def anchor(
        self,
        bundle_refs: Sequence[str],
        request: AnchorRequest,
        *,
        plate: str,
    ) -> AnchorRecord:
        """Anchor a compliance decision.

        Args:
            bundle_refs: Ordered bundle refs of the evaluated context.
            request: Result, state and override flag to anchor.
            plate: Vehicle plate used in the subject reference.

        Returns:
            AnchorRecord returned by the adapter.

        Raises:
            AnchoringNotPermittedError: If the state is never anchored.
            AnchoringError: Propagated unchanged from the adapter.
        """
        if request.state not in ANCHORABLE_STATES:
            raise AnchoringNotPermittedError(request.state)

        payload = self.build_payload(bundle_refs, request)
        anchor_input = self.build_input(payload, plate)

        log = self._log_operation(
            "anchor",
            subject_ref=anchor_input.subject_ref,
            state=request.state,
            manual_override=request.manual_override,
        )
        log.info("anchor_submitting", bundle_hash=anchor_input.bundle_hash)

        record = await self._adapter.submit_proof(anchor_input)

        log.info(
            "anchor_submitted",
            transaction_id=record.transaction_id,
            status=record.status,
        )
        return record
