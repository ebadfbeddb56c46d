"""Interactive compliance workflow.

Drives evaluation cycles end to end:

    load events -> verify domains -> interpret/aggregate/evaluate
    -> operator decisions (state machine) -> anchor proofs

Each cycle runs strictly in that order and builds fresh contexts. A
RESTART outcome from the state machine starts a new cycle only after
the current one has fully completed; there is no loop flag.

Failure policy:
- Verification failure: reported, cycle ends, no verdict.
- Denied authorization: reported, workflow ends, nothing anchored.
- Anchoring failure: reported, not retried, recorded state unchanged.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum

from border_compliance.application.observability.correlation import (
    generate_correlation_id,
    set_correlation_id,
)
from border_compliance.application.ports.event_source import EventSourceProtocol
from border_compliance.application.ports.operator_console import (
    OperatorConsoleProtocol,
)
from border_compliance.application.services.base import LoggingMixin
from border_compliance.application.services.border_test_service import BorderTestService
from border_compliance.application.services.border_verification_service import (
    BorderVerificationService,
)
from border_compliance.application.services.proof_anchoring_service import (
    ProofAnchoringService,
)
from border_compliance.domain.errors.anchoring import AnchoringError
from border_compliance.domain.errors.verification import VerificationFailureError
from border_compliance.domain.models.anchor_record import AnchorRecord, AnchorRequest
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict
from border_compliance.domain.models.compliance_workflow import (
    GATED_ACTIONS,
    StepOutcome,
    StepResult,
    WorkflowPhase,
    WorkflowSnapshot,
)
from border_compliance.domain.services.compliance_state_machine import (
    ComplianceStateMachine,
)

DEFAULT_PLATE = "TRUCK-BorderTest"
SECRET_PROMPT = "Password: "

_PHASE_LEVELS: dict[WorkflowPhase, str] = {
    WorkflowPhase.HOLD: "warning",
    WorkflowPhase.REJECT: "error",
    WorkflowPhase.EXITED: "info",
    WorkflowPhase.PASSED: "success",
    WorkflowPhase.RESTART: "info",
}


class CycleStatus(Enum):
    """How an evaluation cycle ended."""

    COMPLETED = "completed"
    VERIFICATION_FAILED = "verification_failed"
    AUTHORIZATION_DENIED = "authorization_denied"


@dataclass(frozen=True)
class CycleReport:
    """Summary of one evaluation cycle."""

    cycle: int
    correlation_id: str
    status: CycleStatus
    outcome: StepOutcome
    verdict: ComplianceVerdict | None = None
    snapshot: WorkflowSnapshot | None = None
    anchors: tuple[AnchorRecord, ...] = field(default=())
    anchor_failures: tuple[str, ...] = field(default=())


@dataclass(frozen=True)
class WorkflowReport:
    """Summary of a whole workflow run."""

    cycles: tuple[CycleReport, ...]

    @property
    def exit_code(self) -> int:
        """0 unless the last cycle ended in a verification or auth failure."""
        if not self.cycles:
            return 0
        return 0 if self.cycles[-1].status is CycleStatus.COMPLETED else 1


class ComplianceWorkflowService(LoggingMixin):
    """Runs evaluation cycles and the operator override workflow."""

    def __init__(
        self,
        event_source: EventSourceProtocol,
        verification: BorderVerificationService,
        pipeline: BorderTestService,
        state_machine: ComplianceStateMachine,
        anchoring: ProofAnchoringService,
        console: OperatorConsoleProtocol,
        *,
        default_plate: str = DEFAULT_PLATE,
        restart_delay_seconds: float = 0.0,
    ) -> None:
        self._events = event_source
        self._verification = verification
        self._pipeline = pipeline
        self._machine = state_machine
        self._anchoring = anchoring
        self._console = console
        self._default_plate = default_plate
        self._restart_delay = restart_delay_seconds
        self._init_logger(component="workflow")

    async def run(self, max_cycles: int | None = None) -> WorkflowReport:
        """Run cycles until one ends without a restart.

        Args:
            max_cycles: Stop after this many cycles even if the last one
                asked for a restart. None means unbounded.

        Returns:
            WorkflowReport with one CycleReport per cycle.
        """
        cycles: list[CycleReport] = []
        while True:
            report = await self.run_cycle(len(cycles) + 1)
            cycles.append(report)
            if report.outcome is not StepOutcome.RESTART:
                break
            if max_cycles is not None and len(cycles) >= max_cycles:
                break
            if self._restart_delay > 0:
                await asyncio.sleep(self._restart_delay)
        return WorkflowReport(cycles=tuple(cycles))

    async def run_cycle(self, cycle: int) -> CycleReport:
        """Run one complete evaluation cycle.

        Raises:
            EventSourceError: If the event input is empty or malformed.
        """
        correlation_id = generate_correlation_id()
        set_correlation_id(correlation_id)
        log = self._log_operation("run_cycle", cycle=cycle)
        log.info("cycle_started")

        events = await self._events.load_events()

        try:
            summary = await self._verification.verify()
        except VerificationFailureError as exc:
            log.warning("cycle_aborted", domain=exc.domain, reason=exc.reason)
            self._console.show_message(str(exc), level="error")
            return CycleReport(
                cycle=cycle,
                correlation_id=correlation_id,
                status=CycleStatus.VERIFICATION_FAILED,
                outcome=StepOutcome.TERMINATE,
            )
        self._console.show_verification(summary)
        plate = summary.plate or self._default_plate

        result = self._pipeline.run(events)
        verdict = result.compliance
        self._console.show_verdict(verdict)

        snapshot = self._machine.start(verdict)
        if snapshot.phase is WorkflowPhase.REJECT:
            self._console.show_message(
                "Compliance failed. No blockchain operation executed.", level="error"
            )

        anchors: list[AnchorRecord] = []
        anchor_failures: list[str] = []
        status = CycleStatus.COMPLETED
        while True:
            step = await self._prompt_and_step(snapshot)
            snapshot = step.snapshot
            self._report_step(step)

            if step.authorization_denied:
                status = CycleStatus.AUTHORIZATION_DENIED
            if step.anchor_request is not None:
                record = await self._anchor(verdict, step.anchor_request, plate)
                if record is None:
                    anchor_failures.append(step.anchor_request.state)
                else:
                    anchors.append(record)
            if step.outcome is not StepOutcome.AWAIT_OPERATOR:
                break

        log.info(
            "cycle_completed",
            status=status.value,
            phase=snapshot.phase.value,
            outcome=step.outcome.value,
            anchors=len(anchors),
        )
        return CycleReport(
            cycle=cycle,
            correlation_id=correlation_id,
            status=status,
            outcome=step.outcome,
            verdict=verdict,
            snapshot=snapshot,
            anchors=tuple(anchors),
            anchor_failures=tuple(anchor_failures),
        )

    async def _prompt_and_step(self, snapshot: WorkflowSnapshot) -> StepResult:
        action = await self._console.choose(self._machine.available_actions(snapshot))
        credential = None
        if action in GATED_ACTIONS:
            credential = await self._console.ask_secret(SECRET_PROMPT)
        return self._machine.step(snapshot, action, credential)

    def _report_step(self, step: StepResult) -> None:
        if step.authorization_denied:
            self._console.show_message("Wrong password.", level="error")
            return
        level = _PHASE_LEVELS.get(step.snapshot.phase, "info")
        if step.message:
            self._console.show_message(step.message, level=level)
        if step.snapshot.phase is WorkflowPhase.REJECT:
            self._console.show_message("No blockchain operation executed.", level="error")
        elif step.outcome is StepOutcome.RESTART:
            self._console.show_message("Waiting for next compliance check...")

    async def _anchor(
        self, verdict: ComplianceVerdict, request: AnchorRequest, plate: str
    ) -> AnchorRecord | None:
        log = self._log_operation("anchor", state=request.state)
        try:
            record = await self._anchoring.anchor(verdict.bundle_refs, request, plate=plate)
        except AnchoringError as exc:
            log.error("anchor_failed", error=str(exc))
            self._console.show_message(f"Anchor failed: {exc}", level="error")
            return None
        self._console.show_anchor(record)
        return record
