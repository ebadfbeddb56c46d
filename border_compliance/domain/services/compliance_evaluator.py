"""Border compliance evaluation.

Maps a domain state map to a verdict with a fixed rule precedence:

1. identity, token or supply is reject, or supply is hold -> reject
2. identity is hold -> hold
3. otherwise -> valid

Cargo failures (cold chain, seal, inspection, hazmat) are physical-safety
risks and always reject. Identity ambiguity can be resolved
administratively, so it only holds.

A state outside {valid, hold, reject} fails closed: the verdict is
reject, never valid. The evaluator is total and never raises.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from border_compliance.domain.errors.evaluation import EvaluationInconsistencyError
from border_compliance.domain.models.border_context import BorderContext
from border_compliance.domain.models.compliance_state import (
    IDENTITY_DOMAIN,
    REQUIRED_DOMAINS,
    SUPPLY_DOMAIN,
    TOKEN_DOMAIN,
    ComplianceState,
)
from border_compliance.domain.models.compliance_verdict import (
    ComplianceVerdict,
    MissingDomainPolicy,
)

logger = structlog.get_logger()


def _normalize_states(domain_states: Mapping[str, object]) -> dict[str, object]:
    """Copy the map, storing recognized states (str or enum) as their string value."""
    normalized: dict[str, object] = {}
    for domain, state in domain_states.items():
        parsed = ComplianceState.parse(state)
        normalized[domain] = parsed.value if parsed is not None else state
    return normalized


def find_inconsistent_domains(domain_states: Mapping[str, object]) -> tuple[str, ...]:
    """Domains whose state is outside the three-valued set, in map order."""
    return tuple(
        domain
        for domain, state in domain_states.items()
        if ComplianceState.parse(state) is None
    )


def ensure_consistent_states(domain_states: Mapping[str, object]) -> None:
    """Raise on the first domain carrying an unknown state.

    For callers that prefer strict input checking over fail-closed
    evaluation.

    Raises:
        EvaluationInconsistencyError: If any state is outside the set.
    """
    for domain in find_inconsistent_domains(domain_states):
        raise EvaluationInconsistencyError(domain, domain_states[domain])


def evaluate_border_compliance(
    context: BorderContext | Mapping[str, str],
    *,
    missing_domain_policy: MissingDomainPolicy = MissingDomainPolicy.NON_BLOCKING,
) -> ComplianceVerdict:
    """Evaluate a border context (or a bare domain state map) into a verdict.

    Args:
        context: BorderContext, or a domain state map for direct evaluation.
        missing_domain_policy: How absent required domains are treated.

    Returns:
        ComplianceVerdict. Calling twice with the same input yields equal
        verdicts.
    """
    if isinstance(context, BorderContext):
        domain_states: Mapping[str, str] = context.domain_states
        bundle_refs = context.bundle_refs
    else:
        domain_states = context
        bundle_refs = ()

    snapshot = _normalize_states(domain_states)
    inconsistent = find_inconsistent_domains(snapshot)
    missing = tuple(domain for domain in REQUIRED_DOMAINS if domain not in snapshot)

    if inconsistent:
        logger.warning(
            "evaluation_inconsistency",
            domains=list(inconsistent),
            states=[repr(snapshot[d]) for d in inconsistent],
        )

    # Any inconsistent state rejects the whole verdict (fail closed)
    effective = {
        domain: (
            ComplianceState.REJECT if domain in inconsistent else ComplianceState.parse(state)
        )
        for domain, state in snapshot.items()
    }

    if (
        effective.get(IDENTITY_DOMAIN) is ComplianceState.REJECT
        or effective.get(TOKEN_DOMAIN) is ComplianceState.REJECT
        or effective.get(SUPPLY_DOMAIN) is ComplianceState.REJECT
        or effective.get(SUPPLY_DOMAIN) is ComplianceState.HOLD
        or bool(inconsistent)
    ):
        result = ComplianceState.REJECT
    elif missing and missing_domain_policy is MissingDomainPolicy.FAIL_CLOSED:
        result = ComplianceState.REJECT
    elif effective.get(IDENTITY_DOMAIN) is ComplianceState.HOLD:
        result = ComplianceState.HOLD
    else:
        result = ComplianceState.VALID

    return ComplianceVerdict(
        result=result,
        evaluated_domains=snapshot,
        bundle_refs=tuple(bundle_refs),
        inconsistent_domains=inconsistent,
        missing_domains=missing,
    )
