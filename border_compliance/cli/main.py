"""Command line interface for the border compliance engine.

Commands:
    run        Run the interactive checkpoint workflow
    interpret  Interpret canonical events into semantic bundles

Exit codes:
    0    success
    1    input, verification, authorization or structural failure
    2    core schema failure (interpret)
    130  interrupted by the operator
"""

from __future__ import annotations

import asyncio
import json
from contextlib import AsyncExitStack
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from border_compliance import __version__
from border_compliance.application.services import (
    BundleInterpretationService,
    normalize_previous_bundle_ref,
)
from border_compliance.cli.bootstrap import build_workflow
from border_compliance.config import BorderComplianceConfig
from border_compliance.domain.errors import (
    ConfigurationError,
    EventSourceError,
    InterpretationFailedError,
)
from border_compliance.domain.exceptions import BorderComplianceError
from border_compliance.domain.models import SchemaFailure
from border_compliance.infrastructure.adapters import (
    JsonEventSource,
    RichOperatorConsole,
    SystemTimeAuthority,
)
from border_compliance.infrastructure.adapters.json_event_source import STDIN_SOURCE
from border_compliance.infrastructure.observability import configure_structlog
from border_compliance.infrastructure.stubs import MockBundleAnchorStub, SemanticEngineStub

DEFAULT_EVENTS_PATH = Path("events/bordertest.json")

EXIT_INTERRUPTED = 130

app = typer.Typer(
    name="border-compliance",
    help="Border checkpoint compliance: verify, evaluate, override and anchor",
    add_completion=False,
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"border-compliance version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Border Compliance.

    Decide whether a shipment may cross from driver, vehicle and cargo
    evidence, and anchor a proof of the decision.
    """


def _load_config() -> BorderComplianceConfig:
    """Load .env and the environment, then configure logging."""
    load_dotenv()
    try:
        config = BorderComplianceConfig.from_environment()
    except ConfigurationError as exc:
        err_console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    configure_structlog(environment=config.log_environment, level=config.log_level)
    return config


async def _run_workflow(
    config: BorderComplianceConfig,
    events: Path,
    use_stubs: bool,
    max_cycles: int | None,
) -> int:
    async with AsyncExitStack() as stack:
        workflow = await build_workflow(
            config,
            events_path=events,
            use_stubs=use_stubs,
            console=RichOperatorConsole(console),
            stack=stack,
        )
        report = await workflow.run(max_cycles=max_cycles)
    return report.exit_code


@app.command()
def run(
    events: Path = typer.Option(
        DEFAULT_EVENTS_PATH,
        "--events",
        "-e",
        help="JSON file with the canonical events of the shipment (not stdin).",
    ),
    stub: bool = typer.Option(
        False,
        "--stub",
        help="Use in-memory verifiers and anchoring instead of live services.",
    ),
    max_cycles: Optional[int] = typer.Option(
        None,
        "--max-cycles",
        min=1,
        help="Stop after this many evaluation cycles.",
    ),
) -> None:
    """Run the interactive checkpoint workflow.

    Examples:
        border-compliance run --events events/bordertest.json
        border-compliance run --stub --max-cycles 1
    """
    if str(events) == STDIN_SOURCE:
        err_console.print(
            "[red]--events cannot read stdin:[/red] the operator menu reads from the terminal"
        )
        raise typer.Exit(code=1)
    config = _load_config()
    try:
        exit_code = asyncio.run(_run_workflow(config, events, stub, max_cycles))
    except EventSourceError as exc:
        err_console.print(f"[red]{escape(exc.message)}[/red]")
        raise typer.Exit(code=1) from exc
    except BorderComplianceError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        err_console.print("\nInterrupted.")
        raise typer.Exit(code=EXIT_INTERRUPTED) from None
    raise typer.Exit(code=exit_code)


def _print_failure(exc: InterpretationFailedError) -> None:
    err_console.print(f"[{exc.index}] {exc.kind}", markup=False)
    if exc.errors:
        for error in exc.errors:
            err_console.print(f"  - {error}", markup=False)
    else:
        err_console.print("  - No validation errors were provided.")


async def _interpret(
    path: str,
    verbose: bool,
    anchor: bool,
    previous_bundle_ref: str | None,
) -> None:
    events = await JsonEventSource(path).load_events()
    bundle_anchor = MockBundleAnchorStub(SystemTimeAuthority()) if anchor else None
    service = BundleInterpretationService(
        SemanticEngineStub(warn_on_init=False), bundle_anchor
    )

    async for item in service.interpret(events, previous_bundle_ref):
        bundle = item.bundle
        if verbose:
            console.print(
                f"[{item.index}] semantic_bundle -> {bundle.aggregated_state}", markup=False
            )
            console.print_json(json.dumps(bundle.to_dict()))
        else:
            console.print(
                f"[{item.index}] {bundle.aggregated_state.upper()} | "
                f"bundle_ref: {bundle.bundle_ref}",
                markup=False,
            )

        if item.receipt is not None:
            if verbose:
                console.print_json(json.dumps(item.receipt.to_dict()))
            else:
                console.print(
                    f"ANCHOR -> {item.receipt.network} | "
                    f"tx_id: {item.receipt.transaction_id} | {item.receipt.status}",
                    markup=False,
                )


@app.command()
def interpret(
    path: str = typer.Argument(..., help="Event JSON file, or '-' to read stdin."),
    verbose: bool = typer.Option(False, "--verbose", help="Show full bundle output (JSON)."),
    anchor: bool = typer.Option(
        False, "--anchor", help="Simulate mock anchoring for each semantic bundle."
    ),
    previous_bundle_ref: Optional[str] = typer.Option(
        None,
        "--previous-bundle-ref",
        help="Chain from a previous bundle (64-char hex or noema:bundle:sha256:<hex>).",
    ),
) -> None:
    """Interpret canonical events into chained semantic bundles.

    Examples:
        border-compliance interpret events.json --verbose
        cat batch.json | border-compliance interpret - --anchor
    """
    _load_config()

    chained_from = None
    if previous_bundle_ref is not None:
        if not previous_bundle_ref.strip():
            err_console.print("Invalid --previous-bundle-ref value.")
            raise typer.Exit(code=1)
        chained_from = normalize_previous_bundle_ref(previous_bundle_ref)
        if chained_from is None:
            err_console.print(
                "Invalid --previous-bundle-ref format. Expected 64-char hex or "
                "noema:bundle:sha256:<64-char-hex>."
            )
            raise typer.Exit(code=1)

    try:
        asyncio.run(_interpret(path, verbose, anchor, chained_from))
    except EventSourceError as exc:
        err_console.print(exc.message, markup=False)
        raise typer.Exit(code=1) from exc
    except InterpretationFailedError as exc:
        _print_failure(exc)
        raise typer.Exit(code=2 if exc.kind == SchemaFailure.kind else 1) from exc
    except BorderComplianceError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
