"""Compliance anchoring port.

The ledger client and its signing/transaction mechanics live behind this
port, so the evaluator, state machine and anchoring service can be
tested with a deterministic in-memory adapter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from border_compliance.domain.models.anchor_record import (
    AnchorRecord,
    ComplianceAnchorInput,
)


class ComplianceAnchorAdapterProtocol(ABC):
    """Submits compliance proofs to an immutable ledger."""

    @abstractmethod
    async def submit_proof(self, anchor_input: ComplianceAnchorInput) -> AnchorRecord:
        """Submit a proof in a single blocking request.

        There is no retry and no partial commit. The call is not
        cancel-safe: an interrupted submission may or may not land.

        Args:
            anchor_input: Subject, profile, result and bundle hash.

        Returns:
            AnchorRecord receipt from the ledger.

        Raises:
            AnchoringError: On network, timeout or chain rejection.
        """
        ...
