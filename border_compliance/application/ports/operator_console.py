"""Operator console port.

The interactive workflow suspends at each prompt until the operator
answers. Keeping prompts behind this port lets the workflow be driven by
a scripted console in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from border_compliance.domain.models.anchor_record import AnchorRecord
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict
from border_compliance.domain.models.compliance_workflow import OperatorAction
from border_compliance.domain.models.verification import VerificationSummary


class OperatorConsoleProtocol(ABC):
    """Prompts the operator and reports workflow progress."""

    @abstractmethod
    async def choose(self, actions: Sequence[OperatorAction]) -> OperatorAction:
        """Present a menu and return the chosen action."""
        ...

    @abstractmethod
    async def ask_secret(self, prompt: str) -> str:
        """Read a secret without echoing it."""
        ...

    @abstractmethod
    def show_verification(self, summary: VerificationSummary) -> None:
        """Report that all three domains verified."""
        ...

    @abstractmethod
    def show_verdict(self, verdict: ComplianceVerdict) -> None:
        """Report the automated verdict and per-domain states."""
        ...

    @abstractmethod
    def show_message(self, message: str, *, level: str = "info") -> None:
        """Report a transition or status line (info, warning, error)."""
        ...

    @abstractmethod
    def show_anchor(self, record: AnchorRecord) -> None:
        """Report a successful anchor submission."""
        ...
