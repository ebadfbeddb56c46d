"""Models for the manual override workflow.

The workflow sits on top of an automated verdict and lets an operator
accept it or override it. Phases, the actions offered in each phase and
the allowed transitions are declared here; the step logic lives in
ComplianceStateMachine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from border_compliance.domain.models.anchor_record import AnchorRequest
from border_compliance.domain.models.compliance_state import ComplianceState
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict


class WorkflowPhase(Enum):
    """Phases of the override workflow."""

    VALID = "valid"
    HOLD = "hold"
    REJECT = "reject"
    PASSED = "passed"  # Terminal
    EXITED = "exited"  # Terminal
    RESTART = "restart"  # Re-enter the pipeline from event ingestion


class OperatorAction(Enum):
    """Choices an operator can make at a prompt."""

    CONTINUE = "continue"
    MANUAL_HOLD = "manual_hold"
    MANUAL_REJECT = "manual_reject"
    MANUAL_PASS = "manual_pass"
    EXIT = "exit"
    WAIT_FOR_REGISTRATION = "wait_for_registration"


class StepOutcome(Enum):
    """What the driver of the machine should do after a step."""

    AWAIT_OPERATOR = "await_operator"
    RESTART = "restart"
    TERMINATE = "terminate"


class HoldEntryPolicy(Enum):
    """How an automated hold verdict enters the workflow.

    COLLAPSE_TO_REJECT: hold enters the same branch as reject. This is
        the historical presentation-layer behavior.
    ENTER_HOLD: hold enters the HOLD phase, offering Manual Pass / Exit.
    """

    COLLAPSE_TO_REJECT = "collapse_to_reject"
    ENTER_HOLD = "enter_hold"


TERMINAL_PHASES = {WorkflowPhase.PASSED, WorkflowPhase.EXITED, WorkflowPhase.RESTART}

# Actions offered at each prompt, in menu order
PHASE_ACTIONS: dict[WorkflowPhase, tuple[OperatorAction, ...]] = {
    WorkflowPhase.VALID: (
        OperatorAction.CONTINUE,
        OperatorAction.MANUAL_HOLD,
        OperatorAction.MANUAL_REJECT,
    ),
    WorkflowPhase.REJECT: (
        OperatorAction.EXIT,
        OperatorAction.WAIT_FOR_REGISTRATION,
    ),
    WorkflowPhase.HOLD: (
        OperatorAction.MANUAL_PASS,
        OperatorAction.EXIT,
    ),
}

ACTION_LABELS: dict[OperatorAction, str] = {
    OperatorAction.CONTINUE: "Continue",
    OperatorAction.MANUAL_HOLD: "Hold (manual)",
    OperatorAction.MANUAL_REJECT: "Reject (manual)",
    OperatorAction.MANUAL_PASS: "Manual Pass",
    OperatorAction.EXIT: "Exit",
    OperatorAction.WAIT_FOR_REGISTRATION: "Wait for new registration",
}

# Actions that must pass the authorization gate
GATED_ACTIONS = {OperatorAction.MANUAL_HOLD, OperatorAction.MANUAL_PASS}

VALID_TRANSITIONS: list[tuple[WorkflowPhase, WorkflowPhase]] = [
    (WorkflowPhase.VALID, WorkflowPhase.RESTART),
    (WorkflowPhase.VALID, WorkflowPhase.HOLD),
    (WorkflowPhase.VALID, WorkflowPhase.REJECT),
    (WorkflowPhase.VALID, WorkflowPhase.EXITED),  # failed authorization
    (WorkflowPhase.REJECT, WorkflowPhase.EXITED),
    (WorkflowPhase.REJECT, WorkflowPhase.RESTART),
    (WorkflowPhase.HOLD, WorkflowPhase.PASSED),
    (WorkflowPhase.HOLD, WorkflowPhase.EXITED),
]


def is_valid_transition(from_phase: WorkflowPhase, to_phase: WorkflowPhase) -> bool:
    """Check if a phase transition is allowed."""
    return (from_phase, to_phase) in VALID_TRANSITIONS


def is_terminal_phase(phase: WorkflowPhase) -> bool:
    """Check if a phase ends the current cycle."""
    return phase in TERMINAL_PHASES


def available_actions(phase: WorkflowPhase) -> tuple[OperatorAction, ...]:
    """Actions offered to the operator in a phase (empty when terminal)."""
    return PHASE_ACTIONS.get(phase, ())


@dataclass(frozen=True)
class OverrideRecord:
    """A manual override applied by the operator."""

    action: OperatorAction
    from_phase: WorkflowPhase
    to_phase: WorkflowPhase

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action.value,
            "from_phase": self.from_phase.value,
            "to_phase": self.to_phase.value,
        }


@dataclass(frozen=True)
class WorkflowSnapshot:
    """Complete state of the workflow after a step.

    Attributes:
        phase: Current workflow phase.
        recorded_state: Effective compliance state recorded so far. A
            denied override leaves this unchanged.
        verdict: The automated verdict the workflow started from.
        overrides: Manual overrides applied, in order.
    """

    phase: WorkflowPhase
    recorded_state: ComplianceState | None
    verdict: ComplianceVerdict
    overrides: tuple[OverrideRecord, ...] = field(default=())

    @property
    def is_terminal(self) -> bool:
        return is_terminal_phase(self.phase)


@dataclass(frozen=True)
class StepResult:
    """Result of applying one operator action.

    Attributes:
        snapshot: Workflow state after the step.
        outcome: Whether to prompt again, restart the pipeline or stop.
        anchor_request: Proof to anchor as a side effect, if any.
        message: Operator-facing description of what happened.
        authorization_denied: True when the gate rejected the credential.
    """

    snapshot: WorkflowSnapshot
    outcome: StepOutcome
    anchor_request: AnchorRequest | None = None
    message: str = ""
    authorization_denied: bool = False
