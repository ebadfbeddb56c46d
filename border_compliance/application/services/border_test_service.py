"""Border test pipeline: interpret, aggregate, evaluate.

Events that the semantic engine rejects are left out of the border
context and returned to the caller as failures to report.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from border_compliance.application.ports.semantic_engine import SemanticEngineProtocol
from border_compliance.application.services.base import LoggingMixin
from border_compliance.domain.models.border_context import BorderContext
from border_compliance.domain.models.compliance_verdict import (
    ComplianceVerdict,
    MissingDomainPolicy,
)
from border_compliance.domain.models.semantic_bundle import (
    SchemaFailure,
    SemanticBundle,
    StructuralFailure,
)
from border_compliance.domain.services.compliance_evaluator import (
    evaluate_border_compliance,
)
from border_compliance.domain.services.domain_state_aggregator import compose_bundles


@dataclass(frozen=True)
class BorderTestResult:
    """Outcome of one pass through the pipeline."""

    bundles: tuple[SemanticBundle, ...]
    context: BorderContext
    compliance: ComplianceVerdict
    failures: tuple[StructuralFailure | SchemaFailure, ...] = field(default=())


class BorderTestService(LoggingMixin):
    """Runs events through the semantic engine, aggregator and evaluator."""

    def __init__(
        self,
        engine: SemanticEngineProtocol,
        *,
        missing_domain_policy: MissingDomainPolicy = MissingDomainPolicy.NON_BLOCKING,
    ) -> None:
        self._engine = engine
        self._missing_domain_policy = missing_domain_policy
        self._init_logger()

    def run(self, events: Sequence[Mapping[str, Any]]) -> BorderTestResult:
        """Interpret events in order and evaluate the resulting context."""
        log = self._log_operation("run", event_count=len(events))

        bundles: list[SemanticBundle] = []
        failures: list[StructuralFailure | SchemaFailure] = []
        for event in events:
            result = self._engine.interpret(event)
            if isinstance(result, SemanticBundle):
                bundles.append(result)
            else:
                log.warning(
                    "event_not_interpreted",
                    kind=result.kind,
                    event_id=result.event_id,
                    errors=list(result.errors),
                )
                failures.append(result)

        context = compose_bundles(bundles)
        verdict = evaluate_border_compliance(
            context, missing_domain_policy=self._missing_domain_policy
        )
        log.info(
            "compliance_evaluated",
            result=verdict.result.value,
            domains=dict(verdict.evaluated_domains),
            bundle_count=len(bundles),
        )
        return BorderTestResult(
            bundles=tuple(bundles),
            context=context,
            compliance=verdict,
            failures=tuple(failures),
        )
