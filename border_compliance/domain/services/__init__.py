"""Pure domain services: aggregation, evaluation and the override workflow."""

from border_compliance.domain.services.compliance_evaluator import (
    ensure_consistent_states,
    evaluate_border_compliance,
    find_inconsistent_domains,
)
from border_compliance.domain.services.compliance_state_machine import (
    ComplianceStateMachine,
)
from border_compliance.domain.services.domain_state_aggregator import compose_bundles

__all__: list[str] = [
    "ComplianceStateMachine",
    "compose_bundles",
    "ensure_consistent_states",
    "evaluate_border_compliance",
    "find_inconsistent_domains",
]
