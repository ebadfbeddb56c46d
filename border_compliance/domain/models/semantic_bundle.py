"""Semantic engine results.

The semantic engine turns one canonical event into a tagged result:
a SemanticBundle on success, or a StructuralFailure / SchemaFailure.
Only bundles ever reach the aggregator; failures are reported by the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class SemanticBundle:
    """Interpretation of a single canonical event.

    Immutable once produced.

    Attributes:
        domain: Trust domain tag carried by the event (may be absent).
        aggregated_state: State the engine derived for the event.
        bundle_ref: Content hash of the bundle (hex string).
        event: The interpreted canonical event, read-only.
        previous_bundle_ref: Ref of the bundle this one chains from.
    """

    domain: str | None
    aggregated_state: str
    bundle_ref: str
    event: Mapping[str, Any] = field(default_factory=dict)
    previous_bundle_ref: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "event", MappingProxyType(dict(self.event)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "domain": self.domain,
            "aggregated_state": self.aggregated_state,
            "bundle_ref": self.bundle_ref,
            "event": dict(self.event),
            "previous_bundle_ref": self.previous_bundle_ref,
        }


@dataclass(frozen=True)
class StructuralFailure:
    """The event is not structurally a canonical event."""

    event_id: str | None
    errors: tuple[str, ...]

    kind = "structural_fail"


@dataclass(frozen=True)
class SchemaFailure:
    """The event is well formed but violates the core schema."""

    event_id: str | None
    errors: tuple[str, ...]

    kind = "core_schema_fail"


InterpretationResult = Union[SemanticBundle, StructuralFailure, SchemaFailure]
