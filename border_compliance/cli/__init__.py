"""Command line interface (typer)."""

from border_compliance.cli.main import app

__all__ = ["app"]
