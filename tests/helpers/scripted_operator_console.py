"""ScriptedOperatorConsole - operator console driven by a fixed script.

Answers menu prompts and secret prompts from queues and records
everything the workflow reports, so workflow tests can assert on the
operator-visible transcript.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from border_compliance.application.ports.operator_console import (
    OperatorConsoleProtocol,
)
from border_compliance.domain.models.anchor_record import AnchorRecord
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict
from border_compliance.domain.models.compliance_workflow import OperatorAction
from border_compliance.domain.models.verification import VerificationSummary


class ScriptExhaustedError(AssertionError):
    """The workflow prompted more often than the script allows."""


class ScriptedOperatorConsole(OperatorConsoleProtocol):
    """Console that replays scripted operator input.

    Example:
        >>> console = ScriptedOperatorConsole(
        ...     actions=[OperatorAction.MANUAL_HOLD],
        ...     secrets=["1234"],
        ... )
    """

    def __init__(
        self,
        actions: Iterable[OperatorAction] = (),
        secrets: Iterable[str] = (),
    ) -> None:
        self._actions = deque(actions)
        self._secrets = deque(secrets)
        self.offered: list[tuple[OperatorAction, ...]] = []
        self.secret_prompts: list[str] = []
        self.messages: list[tuple[str, str]] = []
        self.verdicts: list[ComplianceVerdict] = []
        self.summaries: list[VerificationSummary] = []
        self.anchors: list[AnchorRecord] = []

    async def choose(self, actions: Sequence[OperatorAction]) -> OperatorAction:
        self.offered.append(tuple(actions))
        if not self._actions:
            raise ScriptExhaustedError(f"No scripted action for menu {list(actions)}")
        action = self._actions.popleft()
        if action not in actions:
            raise AssertionError(f"Scripted {action} not offered in {list(actions)}")
        return action

    async def ask_secret(self, prompt: str) -> str:
        self.secret_prompts.append(prompt)
        if not self._secrets:
            raise ScriptExhaustedError("No scripted secret")
        return self._secrets.popleft()

    def show_verification(self, summary: VerificationSummary) -> None:
        self.summaries.append(summary)

    def show_verdict(self, verdict: ComplianceVerdict) -> None:
        self.verdicts.append(verdict)

    def show_message(self, message: str, *, level: str = "info") -> None:
        self.messages.append((level, message))

    def show_anchor(self, record: AnchorRecord) -> None:
        self.anchors.append(record)

    @property
    def message_texts(self) -> list[str]:
        return [text for _, text in self.messages]
