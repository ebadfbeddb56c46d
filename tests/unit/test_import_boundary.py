"""Unit tests for the import boundary checking script.

Tests verify that the hexagonal architecture import rules are enforced:
- domain/ imports NOTHING from other package layers
- application/ and config/ import from domain/ only
- infrastructure/ imports from domain/ and application/
- cli/ is the composition root and may import from every layer
"""

import ast

# Import from scripts directory
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    PACKAGE_NAME,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    get_import_module,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / PACKAGE_NAME


def _write_module(package_dir: Path, relative: str, source: str) -> Path:
    path = package_dir / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(source, encoding="utf-8")
    return path


class TestLayerHierarchy:
    """Test that the layer hierarchy is correctly defined."""

    def test_domain_is_innermost(self) -> None:
        assert LAYER_HIERARCHY["domain"] == 0

    def test_application_and_config_are_level_1(self) -> None:
        assert LAYER_HIERARCHY["application"] == 1
        assert LAYER_HIERARCHY["config"] == 1

    def test_cli_is_outermost(self) -> None:
        assert LAYER_HIERARCHY["cli"] == max(LAYER_HIERARCHY.values())


class TestAllowedImports:
    def test_domain_imports_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == set()

    def test_application_imports_domain_only(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_infrastructure_imports_domain_and_application(self) -> None:
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application"}

    def test_cli_imports_everything(self) -> None:
        assert ALLOWED_IMPORTS["cli"] == {"domain", "application", "config", "infrastructure"}


class TestGetImportModule:
    def test_import_from_statement(self) -> None:
        node = ast.parse("from border_compliance.domain.models import ComplianceState").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_module(node) == "border_compliance.domain.models"

    def test_import_statement(self) -> None:
        node = ast.parse("import border_compliance.application.services").body[0]
        assert isinstance(node, ast.Import)
        assert get_import_module(node) == "border_compliance.application.services"

    def test_relative_import_has_no_module(self) -> None:
        node = ast.parse("from . import models").body[0]
        assert get_import_module(node) is None


class TestCheckFileImports:
    def test_domain_importing_infrastructure(self, tmp_path: Path) -> None:
        path = _write_module(
            tmp_path,
            "domain/services/bad.py",
            "from border_compliance.infrastructure.adapters import JsonEventSource\n",
        )

        violations = check_file_imports(path, tmp_path)

        assert len(violations) == 1
        assert violations[0][1] == 1
        assert violations[0][2] == "domain layer cannot import from infrastructure"

    def test_application_importing_config(self, tmp_path: Path) -> None:
        path = _write_module(
            tmp_path,
            "application/services/bad.py",
            "import os\n\nimport border_compliance.config.settings\n",
        )

        violations = check_file_imports(path, tmp_path)

        assert [(line, msg) for _, line, msg in violations] == [
            (3, "application layer cannot import from config")
        ]

    def test_allowed_and_third_party_imports(self, tmp_path: Path) -> None:
        path = _write_module(
            tmp_path,
            "infrastructure/adapters/ok.py",
            "import httpx\n"
            "from border_compliance.application.ports.event_source import EventSourceProtocol\n"
            "from border_compliance.domain.errors import EventSourceError\n",
        )

        assert check_file_imports(path, tmp_path) == []

    def test_same_layer_import(self, tmp_path: Path) -> None:
        path = _write_module(
            tmp_path, "domain/a.py", "from border_compliance.domain.models import BorderContext\n"
        )

        assert check_file_imports(path, tmp_path) == []

    def test_top_level_modules_are_skipped(self, tmp_path: Path) -> None:
        path = _write_module(
            tmp_path, "__main__.py", "from border_compliance.cli.main import app\n"
        )

        assert check_file_imports(path, tmp_path) == []


class TestCheckImportBoundaries:
    def test_collects_violations_across_files(self, tmp_path: Path) -> None:
        _write_module(tmp_path, "domain/x.py", "from border_compliance.cli import app\n")
        _write_module(
            tmp_path, "config/y.py", "from border_compliance.application import services\n"
        )

        violations = check_import_boundaries(tmp_path)

        assert len(violations) == 2
        report = format_violations(violations)
        assert "Total: 2 violation(s)" in report

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert check_import_boundaries(tmp_path / "missing") == []

    def test_package_has_no_violations(self) -> None:
        violations = check_import_boundaries(PACKAGE_DIR)

        assert violations == [], format_violations(violations)
