#!/usr/bin/env python3
"""Pre-commit hook to prevent direct datetime.now() calls in package code.

Proof payloads carry a timestamp that is part of the hashed bundle, so
every timestamp must come from an injected TimeAuthorityProtocol. Only
the system clock adapter reads the host clock.

Usage:
    python scripts/check_no_datetime_now.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found - datetime.now() detected in package code
"""

import re
import sys
from pathlib import Path

PACKAGE_NAME = "border_compliance"

# Matches: datetime.now(), datetime.utcnow()
DATETIME_NOW_PATTERN = re.compile(r"datetime\s*\.\s*(now|utcnow)\s*\(", re.MULTILINE)

# Paths relative to the package directory
ALLOWED_FILES = {
    "infrastructure/adapters/system_time_authority.py",
}


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Check a single file for datetime.now() violations.

    Args:
        file_path: Path to the Python file to check.

    Returns:
        List of (line_number, line_content) tuples for violations.
    """
    violations: list[tuple[int, str]] = []

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return violations

    for line_num, line in enumerate(content.splitlines(), start=1):
        if line.lstrip().startswith("#"):
            continue
        if DATETIME_NOW_PATTERN.search(line):
            violations.append((line_num, line.strip()))

    return violations


def find_violations(package_dir: Path) -> dict[str, list[tuple[int, str]]]:
    """Scan every module under package_dir except the allowed ones."""
    all_violations: dict[str, list[tuple[int, str]]] = {}
    for py_file in package_dir.rglob("*.py"):
        relative_path = py_file.relative_to(package_dir).as_posix()
        if relative_path in ALLOWED_FILES:
            continue
        violations = check_file(py_file)
        if violations:
            all_violations[relative_path] = violations
    return all_violations


def main() -> int:
    """Main entry point for the pre-commit hook.

    Returns:
        Exit code: 0 for success, 1 for violations found.
    """
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    if not package_dir.exists():
        print(f"Warning: {package_dir} not found, skipping check")
        return 0

    all_violations = find_violations(package_dir)
    if not all_violations:
        print(f"No datetime.now() violations found in {package_dir}")
        return 0

    print("Direct datetime.now() calls detected:")
    print()
    for file_path, violations in sorted(all_violations.items()):
        print(f"  {file_path}:")
        for line_num, line_content in violations:
            print(f"    Line {line_num}: {line_content}")
        print()

    print("How to fix:")
    print("  1. Inject TimeAuthorityProtocol in your service constructor")
    print("  2. Use self._time.now() instead of datetime.now()")
    print()

    return 1


if __name__ == "__main__":
    sys.exit(main())
