"""Domain state aggregation.

Folds an ordered sequence of semantic bundles into a BorderContext:
a per-domain state map and the ordered list of bundle refs.

Policy:
- A bundle without a domain tag is filed under "unknown" instead of
  being rejected.
- When two bundles share a domain, the later one wins.
"""

from __future__ import annotations

from collections.abc import Iterable

from border_compliance.domain.models.border_context import BorderContext
from border_compliance.domain.models.compliance_state import UNKNOWN_DOMAIN
from border_compliance.domain.models.semantic_bundle import SemanticBundle


def compose_bundles(bundles: Iterable[SemanticBundle]) -> BorderContext:
    """Fold bundles, in arrival order, into a border context.

    Args:
        bundles: Successfully interpreted bundles, possibly empty.

    Returns:
        BorderContext whose bundle_refs has one entry per input bundle,
        in input order.
    """
    domain_states: dict[str, str] = {}
    bundle_refs: list[str] = []
    folded: list[SemanticBundle] = []

    for bundle in bundles:
        domain = bundle.domain or UNKNOWN_DOMAIN
        domain_states[domain] = bundle.aggregated_state
        bundle_refs.append(bundle.bundle_ref)
        folded.append(bundle)

    return BorderContext(
        bundle_refs=tuple(bundle_refs),
        domain_states=domain_states,
        bundles=tuple(folded),
    )
