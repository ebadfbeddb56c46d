"""Automated compliance verdict."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from border_compliance.domain.models.compliance_state import ComplianceState


class MissingDomainPolicy(Enum):
    """How the evaluator treats required domains absent from the map.

    NON_BLOCKING: absent domains contribute neither reject nor hold.
        This is the historical fail-open behavior.
    FAIL_CLOSED: any absent required domain yields reject.
    """

    NON_BLOCKING = "non_blocking"
    FAIL_CLOSED = "fail_closed"


@dataclass(frozen=True)
class ComplianceVerdict:
    """Automated valid/hold/reject decision.

    A pure function of the domain state map: no timestamps, no I/O.

    Attributes:
        result: The verdict.
        evaluated_domains: Snapshot of the domain state map.
        bundle_refs: Copy of the ordered bundle refs.
        inconsistent_domains: Domains whose state was outside the
            three-valued set (treated as reject).
        missing_domains: Required domains absent from the map.
    """

    result: ComplianceState
    evaluated_domains: Mapping[str, str]
    bundle_refs: tuple[str, ...]
    inconsistent_domains: tuple[str, ...] = field(default=())
    missing_domains: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "evaluated_domains", MappingProxyType(dict(self.evaluated_domains))
        )

    @property
    def is_valid(self) -> bool:
        return self.result is ComplianceState.VALID

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "result": self.result.value,
            "evaluated_domains": dict(self.evaluated_domains),
            "bundle_refs": list(self.bundle_refs),
            "inconsistent_domains": list(self.inconsistent_domains),
            "missing_domains": list(self.missing_domains),
        }
