"""Border context produced by folding semantic bundles."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from border_compliance.domain.models.semantic_bundle import SemanticBundle


@dataclass(frozen=True)
class BorderContext:
    """Aggregated view of one evaluation cycle.

    Built once per cycle and never mutated afterwards. The domain state
    map is exposed through a read-only proxy.

    Attributes:
        bundle_refs: Bundle refs in processing order.
        domain_states: Mapping of domain name to state.
        bundles: The bundles that were folded, in processing order.
    """

    bundle_refs: tuple[str, ...]
    domain_states: Mapping[str, str]
    bundles: tuple[SemanticBundle, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain_states", MappingProxyType(dict(self.domain_states)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "bundle_refs": list(self.bundle_refs),
            "domain_states": dict(self.domain_states),
            "bundles": [bundle.to_dict() for bundle in self.bundles],
        }
