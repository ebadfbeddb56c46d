"""Manual override state machine.

Drives the operator workflow on top of an automated verdict. The machine
performs no I/O: each step takes the current snapshot and one operator
action and returns the next snapshot together with an explicit outcome
(prompt again, restart the pipeline, or stop) and, where applicable, a
request to anchor a compliance proof. Anchoring itself is done by the
caller.

Transitions:
- VALID  --Continue-->           RESTART  (anchor valid, no override)
- VALID  --Hold (manual)-->      HOLD     (gated, anchor hold, override)
- VALID  --Reject (manual)-->    REJECT   (override, never anchored)
- REJECT --Exit-->               EXITED
- REJECT --Wait for new reg.-->  RESTART
- HOLD   --Manual Pass-->        PASSED   (gated, override)
- HOLD   --Exit-->               EXITED

A failed authorization aborts the requested transition: the phase
becomes EXITED and the recorded state is left as it was.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from border_compliance.domain.errors.workflow import (
    AuthorizationFailedError,
    InvalidTransitionError,
)
from border_compliance.domain.models.anchor_record import AnchorRequest
from border_compliance.domain.models.compliance_state import ComplianceState
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict
from border_compliance.domain.models.compliance_workflow import (
    GATED_ACTIONS,
    HoldEntryPolicy,
    OperatorAction,
    OverrideRecord,
    StepOutcome,
    StepResult,
    WorkflowPhase,
    WorkflowSnapshot,
    available_actions,
    is_valid_transition,
)
from border_compliance.domain.ports.authenticator import AuthenticatorProtocol

logger = structlog.get_logger()

_PHASE_STATE: dict[WorkflowPhase, ComplianceState] = {
    WorkflowPhase.VALID: ComplianceState.VALID,
    WorkflowPhase.HOLD: ComplianceState.HOLD,
    WorkflowPhase.REJECT: ComplianceState.REJECT,
}


class ComplianceStateMachine:
    """Operator override workflow over an automated verdict.

    Attributes:
        hold_entry_policy: How an automated hold verdict enters the
            workflow. Defaults to collapsing it into the reject branch.
    """

    def __init__(
        self,
        authenticator: AuthenticatorProtocol,
        hold_entry_policy: HoldEntryPolicy = HoldEntryPolicy.COLLAPSE_TO_REJECT,
    ) -> None:
        self._authenticator = authenticator
        self.hold_entry_policy = hold_entry_policy

    def entry_phase(self, verdict: ComplianceVerdict) -> WorkflowPhase:
        """Phase the workflow starts in for an automated verdict."""
        if verdict.result is ComplianceState.VALID:
            return WorkflowPhase.VALID
        if (
            verdict.result is ComplianceState.HOLD
            and self.hold_entry_policy is HoldEntryPolicy.ENTER_HOLD
        ):
            return WorkflowPhase.HOLD
        return WorkflowPhase.REJECT

    def start(self, verdict: ComplianceVerdict) -> WorkflowSnapshot:
        """Create the initial snapshot for a verdict."""
        phase = self.entry_phase(verdict)
        return WorkflowSnapshot(
            phase=phase,
            recorded_state=_PHASE_STATE[phase],
            verdict=verdict,
        )

    def available_actions(self, snapshot: WorkflowSnapshot) -> tuple[OperatorAction, ...]:
        """Actions the operator may choose in the snapshot's phase."""
        return available_actions(snapshot.phase)

    def step(
        self,
        snapshot: WorkflowSnapshot,
        action: OperatorAction,
        credential: str | None = None,
    ) -> StepResult:
        """Apply one operator action.

        Args:
            snapshot: Current workflow snapshot.
            action: The operator's choice.
            credential: Secret entered for gated actions.

        Returns:
            StepResult with the next snapshot and outcome.

        Raises:
            InvalidTransitionError: If the action is not offered in the
                current phase.
        """
        if action not in available_actions(snapshot.phase):
            raise InvalidTransitionError(snapshot.phase.value, action.value)

        if action in GATED_ACTIONS:
            try:
                self._authorize(action, credential)
            except AuthorizationFailedError as exc:
                logger.warning(
                    "override_authorization_denied",
                    phase=snapshot.phase.value,
                    action=action.value,
                )
                return StepResult(
                    snapshot=replace(snapshot, phase=WorkflowPhase.EXITED),
                    outcome=StepOutcome.TERMINATE,
                    message=str(exc),
                    authorization_denied=True,
                )

        if snapshot.phase is WorkflowPhase.VALID:
            return self._step_from_valid(snapshot, action)
        if snapshot.phase is WorkflowPhase.HOLD:
            return self._step_from_hold(snapshot, action)
        return self._step_from_reject(snapshot, action)

    def _authorize(self, action: OperatorAction, credential: str | None) -> None:
        if not self._authenticator.verify(credential):
            raise AuthorizationFailedError(action.value)

    def _step_from_valid(
        self, snapshot: WorkflowSnapshot, action: OperatorAction
    ) -> StepResult:
        if action is OperatorAction.CONTINUE:
            return StepResult(
                snapshot=self._move(snapshot, WorkflowPhase.RESTART),
                outcome=StepOutcome.RESTART,
                anchor_request=AnchorRequest(
                    result=True,
                    state=ComplianceState.VALID.value,
                    manual_override=False,
                ),
                message="Compliance accepted",
            )

        if action is OperatorAction.MANUAL_HOLD:
            return StepResult(
                snapshot=self._override(
                    snapshot, action, WorkflowPhase.HOLD, ComplianceState.HOLD
                ),
                outcome=StepOutcome.AWAIT_OPERATOR,
                anchor_request=AnchorRequest(
                    result=False,
                    state=ComplianceState.HOLD.value,
                    manual_override=True,
                ),
                message="State Transition: VALID -> HOLD",
            )

        # Manual rejections are never anchored
        return StepResult(
            snapshot=self._override(
                snapshot, action, WorkflowPhase.REJECT, ComplianceState.REJECT
            ),
            outcome=StepOutcome.AWAIT_OPERATOR,
            message="State Transition: VALID -> REJECT",
        )

    def _step_from_hold(
        self, snapshot: WorkflowSnapshot, action: OperatorAction
    ) -> StepResult:
        if action is OperatorAction.MANUAL_PASS:
            return StepResult(
                snapshot=self._override(
                    snapshot, action, WorkflowPhase.PASSED, ComplianceState.VALID
                ),
                outcome=StepOutcome.TERMINATE,
                message="State Transition: HOLD -> PASSED",
            )
        return StepResult(
            snapshot=self._move(snapshot, WorkflowPhase.EXITED),
            outcome=StepOutcome.TERMINATE,
            message="Exited",
        )

    def _step_from_reject(
        self, snapshot: WorkflowSnapshot, action: OperatorAction
    ) -> StepResult:
        if action is OperatorAction.WAIT_FOR_REGISTRATION:
            return StepResult(
                snapshot=self._move(snapshot, WorkflowPhase.RESTART),
                outcome=StepOutcome.RESTART,
                message="Waiting for new registration",
            )
        return StepResult(
            snapshot=self._move(snapshot, WorkflowPhase.EXITED),
            outcome=StepOutcome.TERMINATE,
            message="Exited",
        )

    @staticmethod
    def _move(snapshot: WorkflowSnapshot, to_phase: WorkflowPhase) -> WorkflowSnapshot:
        assert is_valid_transition(snapshot.phase, to_phase)
        return replace(snapshot, phase=to_phase)

    def _override(
        self,
        snapshot: WorkflowSnapshot,
        action: OperatorAction,
        to_phase: WorkflowPhase,
        recorded_state: ComplianceState,
    ) -> WorkflowSnapshot:
        record = OverrideRecord(action=action, from_phase=snapshot.phase, to_phase=to_phase)
        logger.info(
            "manual_override_applied",
            action=action.value,
            from_phase=snapshot.phase.value,
            to_phase=to_phase.value,
        )
        return replace(
            self._move(snapshot, to_phase),
            recorded_state=recorded_state,
            overrides=snapshot.overrides + (record,),
        )
