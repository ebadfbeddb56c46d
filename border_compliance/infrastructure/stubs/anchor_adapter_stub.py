"""In-memory anchoring stubs.

WARNING: These stubs are NOT for production use. Nothing is written to
a ledger; receipts are fabricated deterministically.
"""

from __future__ import annotations

import warnings

from border_compliance.application.ports.anchor_adapter import (
    ComplianceAnchorAdapterProtocol,
)
from border_compliance.application.ports.bundle_anchor import BundleAnchorProtocol
from border_compliance.application.ports.time_authority import TimeAuthorityProtocol
from border_compliance.domain.errors.anchoring import AnchoringError
from border_compliance.domain.models.anchor_record import (
    AnchorRecord,
    BundleAnchorReceipt,
    ComplianceAnchorInput,
)
from border_compliance.domain.models.semantic_bundle import SemanticBundle

DEV_MODE_WARNING = "[DEV MODE] in-memory anchoring in use - NOT FOR PRODUCTION"

IN_MEMORY_NETWORK = "in-memory"
MOCK_BUNDLE_NETWORK = "IOTA-MOCK"
CONFIRMED = "confirmed"


class InMemoryAnchorAdapterStub(ComplianceAnchorAdapterProtocol):
    """Records submitted proofs and returns sequential receipts.

    Example:
        stub = InMemoryAnchorAdapterStub(time_authority)
        record = await stub.submit_proof(anchor_input)
        assert stub.submissions == [anchor_input]

        stub.set_failure(True, reason="timeout")
        await stub.submit_proof(anchor_input)  # Raises AnchoringError
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        warn_on_init: bool = True,
    ) -> None:
        if warn_on_init:
            warnings.warn(DEV_MODE_WARNING, UserWarning, stacklevel=2)
        self._time = time_authority
        self._should_fail = False
        self._failure_reason: str | None = None
        self.submissions: list[ComplianceAnchorInput] = []
        self.records: list[AnchorRecord] = []

    async def submit_proof(self, anchor_input: ComplianceAnchorInput) -> AnchorRecord:
        if self._should_fail:
            raise AnchoringError(
                self._failure_reason or "Simulated anchoring failure",
                subject_ref=anchor_input.subject_ref,
            )
        self.submissions.append(anchor_input)
        record = AnchorRecord.from_input(
            anchor_input,
            transaction_id=f"memory:tx:{len(self.submissions):06d}",
            anchored_at=self._time.now().isoformat(),
            status=CONFIRMED,
            network=IN_MEMORY_NETWORK,
        )
        self.records.append(record)
        return record

    # Test control methods

    def set_failure(self, should_fail: bool, reason: str | None = None) -> None:
        self._should_fail = should_fail
        self._failure_reason = reason

    def clear(self) -> None:
        self.submissions.clear()
        self.records.clear()


class MockBundleAnchorStub(BundleAnchorProtocol):
    """Simulated per-bundle anchoring for the interpret command."""

    def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
        self._time = time_authority
        self.anchored: list[str] = []

    async def anchor(self, bundle: SemanticBundle) -> BundleAnchorReceipt:
        if not bundle.bundle_ref:
            raise AnchoringError("Invalid bundle: missing bundle_ref")
        self.anchored.append(bundle.bundle_ref)
        return BundleAnchorReceipt(
            network=MOCK_BUNDLE_NETWORK,
            transaction_id=f"mock:tx:{bundle.bundle_ref[:16]}",
            anchored_at=self._time.now().isoformat(),
            status=CONFIRMED,
        )
