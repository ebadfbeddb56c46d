"""Terminal operator console built on rich.

Blocking prompts run in a worker thread so the event loop stays free
while the workflow waits on the operator.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from border_compliance.application.ports.operator_console import (
    OperatorConsoleProtocol,
)
from border_compliance.domain.models.anchor_record import AnchorRecord
from border_compliance.domain.models.compliance_state import (
    DOMAIN_LABELS,
    REQUIRED_DOMAINS,
    ComplianceState,
)
from border_compliance.domain.models.compliance_verdict import ComplianceVerdict
from border_compliance.domain.models.compliance_workflow import (
    ACTION_LABELS,
    OperatorAction,
)
from border_compliance.domain.models.verification import VerificationSummary

LEVEL_STYLES: dict[str, str] = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}

STATE_STYLES: dict[str, str] = {
    ComplianceState.VALID.value: "green",
    ComplianceState.HOLD.value: "yellow",
    ComplianceState.REJECT.value: "red",
}


class RichOperatorConsole(OperatorConsoleProtocol):
    """Numbered-menu console for the checkpoint operator."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    async def choose(self, actions: Sequence[OperatorAction]) -> OperatorAction:
        for number, action in enumerate(actions, start=1):
            self.console.print(f"  [bold][{number}][/bold] {ACTION_LABELS[action]}")
        choices = [str(number) for number in range(1, len(actions) + 1)]
        selected = await asyncio.to_thread(
            IntPrompt.ask, "Choose", console=self.console, choices=choices
        )
        return actions[selected - 1]

    async def ask_secret(self, prompt: str) -> str:
        return await asyncio.to_thread(
            Prompt.ask, prompt.rstrip(": "), console=self.console, password=True
        )

    def show_verification(self, summary: VerificationSummary) -> None:
        self.console.print(
            f"[green]Driver verified[/green] {escape(summary.identity.driver_did)} "
            f"({summary.identity.credential_count} credential(s))"
        )
        self.console.print(
            f"[green]Vehicle certificate active[/green] {escape(summary.vehicle.plate)} "
            f"[dim]{escape(summary.vehicle.vehicle_class)}[/dim]"
        )
        self.console.print(
            f"[green]Cargo manifest cleared[/green] {escape(summary.cargo.manifest_id)}"
        )

    def show_verdict(self, verdict: ComplianceVerdict) -> None:
        table = Table(title="Border compliance")
        table.add_column("Domain")
        table.add_column("State")
        for domain in REQUIRED_DOMAINS:
            state = str(verdict.evaluated_domains.get(domain, "missing"))
            style = STATE_STYLES.get(state, "magenta")
            table.add_row(DOMAIN_LABELS[domain], f"[{style}]{escape(state)}[/{style}]")
        self.console.print(table)

        style = STATE_STYLES[verdict.result.value]
        self.console.print(f"Result: [bold {style}]{verdict.result.value.upper()}[/bold {style}]")
        if verdict.inconsistent_domains:
            self.console.print(
                "[red]Unrecognized states in:[/red] "
                + escape(", ".join(verdict.inconsistent_domains))
            )

    def show_message(self, message: str, *, level: str = "info") -> None:
        style = LEVEL_STYLES.get(level, "white")
        self.console.print(f"[{style}]{escape(message)}[/{style}]")

    def show_anchor(self, record: AnchorRecord) -> None:
        self.console.print(
            f"[green]Anchored[/green] {escape(record.subject_ref)} on {escape(record.network)}: "
            f"{escape(record.transaction_id)} ({escape(record.status)})"
        )
        self.console.print(f"  bundle_hash: {record.bundle_hash}", style="dim")
