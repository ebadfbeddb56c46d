"""Compliance proof payloads and ledger receipts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

SUBJECT_REF_PREFIX = "vehicle:plate:"


class DigestAlgorithm(Enum):
    """256-bit digest used to derive the bundle hash."""

    SHA256 = "sha256"
    BLAKE3 = "blake3"


def vehicle_subject_ref(plate: str) -> str:
    """Build the ledger subject reference for a vehicle plate."""
    return f"{SUBJECT_REF_PREFIX}{plate}"


@dataclass(frozen=True)
class AnchorRequest:
    """What the override workflow asks to be anchored.

    Attributes:
        result: Whether the shipment passed.
        state: Effective compliance state ("valid" or "hold").
        manual_override: True when an operator forced the state.
    """

    result: bool
    state: str
    manual_override: bool


@dataclass(frozen=True)
class CompliancePayload:
    """Canonical payload whose digest becomes the bundle hash.

    Field order is part of the canonical form.
    """

    bundle_refs: tuple[str, ...]
    result: bool
    state: str
    manual_override: bool
    timestamp: int  # milliseconds since epoch

    def to_dict(self) -> dict[str, Any]:
        """Convert to an ordered dictionary in canonical field order."""
        return {
            "bundle_refs": list(self.bundle_refs),
            "result": self.result,
            "state": self.state,
            "manual_override": self.manual_override,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ComplianceAnchorInput:
    """Input submitted to the anchoring adapter."""

    subject_ref: str
    profile_id: str
    result: bool
    bundle_hash: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject_ref": self.subject_ref,
            "profile_id": self.profile_id,
            "result": self.result,
            "bundle_hash": self.bundle_hash,
        }


@dataclass(frozen=True)
class AnchorRecord:
    """Ledger receipt for an anchored compliance proof.

    Produced by the anchoring adapter; immutable once returned.
    """

    subject_ref: str
    profile_id: str
    result: bool
    bundle_hash: str
    transaction_id: str
    anchored_at: str
    status: str
    network: str = "unknown"

    @classmethod
    def from_input(
        cls,
        anchor_input: ComplianceAnchorInput,
        *,
        transaction_id: str,
        anchored_at: str,
        status: str,
        network: str,
    ) -> AnchorRecord:
        """Create a receipt echoing the submitted input."""
        return cls(
            subject_ref=anchor_input.subject_ref,
            profile_id=anchor_input.profile_id,
            result=anchor_input.result,
            bundle_hash=anchor_input.bundle_hash,
            transaction_id=transaction_id,
            anchored_at=anchored_at,
            status=status,
            network=network,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "subject_ref": self.subject_ref,
            "profile_id": self.profile_id,
            "result": self.result,
            "bundle_hash": self.bundle_hash,
            "transaction_id": self.transaction_id,
            "anchored_at": self.anchored_at,
            "status": self.status,
            "network": self.network,
        }


@dataclass(frozen=True)
class BundleAnchorReceipt:
    """Receipt for anchoring a single semantic bundle."""

    network: str
    transaction_id: str
    anchored_at: str
    status: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "network": self.network,
            "transaction_id": self.transaction_id,
            "anchored_at": self.anchored_at,
            "status": self.status,
        }
