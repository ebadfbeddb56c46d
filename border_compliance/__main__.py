"""Allow ``python -m border_compliance``."""

from border_compliance.cli.main import app

app()
