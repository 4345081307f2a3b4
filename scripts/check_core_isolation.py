#!/usr/bin/env python3
"""Core isolation validation script.

Enforces the architectural rule that the scanning engine stays independent of
the command-line layer and of the process provider. The filesystem, pipeline
and export modules, plus types/ and utils/, must never import:
- click or anything from fscan.app
- psutil or anything from fscan.core.process

Exit codes:
    0: No violations found (clean)
    1: Violations detected (architectural rule broken)
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Final

# ANSI color codes for terminal output
RED: Final[str] = "\033[91m"
GREEN: Final[str] = "\033[92m"
YELLOW: Final[str] = "\033[93m"
RESET: Final[str] = "\033[0m"

# Paths (relative to src/fscan) that must stay isolated
PROTECTED_PATHS: Final[tuple[str, ...]] = (
    "core/filesystem",
    "core/pipeline.py",
    "core/export.py",
    "core/config.py",
    "types",
    "utils",
)

FORBIDDEN_IMPORT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\s*(?:from|import)\s+(?:click|psutil|fscan\.app|fscan\.core\.process)\b"
)


def check_file(file_path: Path) -> list[tuple[int, str]]:
    """Check a single Python file for forbidden imports.

    Args:
        file_path: Path to the Python file to check.

    Returns:
        List of (line_number, violation_description) tuples.
        Empty list if no violations found.
    """
    violations: list[tuple[int, str]] = []

    try:
        lines = file_path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        print(f"{YELLOW}Warning: Could not read {file_path}: {e}{RESET}", file=sys.stderr)
        return violations

    for line_num, line in enumerate(lines, start=1):
        if FORBIDDEN_IMPORT_PATTERN.search(line):
            violations.append((line_num, f"Forbidden import: {line.strip()}"))

    return violations


def scan_path(base_path: Path, protected: str) -> dict[Path, list[tuple[int, str]]]:
    """Scan a protected file or directory for violations.

    Args:
        base_path: Root path of the fscan package.
        protected: Relative path of a protected module or package.

    Returns:
        Dictionary mapping file paths to their violations.
    """
    target = base_path / protected
    if not target.exists():
        print(f"{YELLOW}Warning: Protected path {target} does not exist{RESET}", file=sys.stderr)
        return {}

    files = [target] if target.is_file() else [p for p in target.rglob("*.py") if "__pycache__" not in p.parts]

    violations_by_file: dict[Path, list[tuple[int, str]]] = {}
    for py_file in files:
        file_violations = check_file(py_file)
        if file_violations:
            violations_by_file[py_file] = file_violations

    return violations_by_file


def main() -> int:
    """Main entry point for the core isolation check.

    Returns:
        Exit code: 0 if no violations, 1 if violations found.
    """
    project_root = Path(__file__).parent.parent
    src_path = project_root / "src" / "fscan"

    if not src_path.exists():
        print(f"{RED}Error: Could not find src/fscan directory{RESET}", file=sys.stderr)
        return 1

    print("Checking core isolation of the scanning engine...")
    print(f"Scanning: {src_path}\n")

    all_violations: dict[Path, list[tuple[int, str]]] = {}
    for protected in PROTECTED_PATHS:
        all_violations.update(scan_path(src_path, protected))

    if not all_violations:
        print(f"{GREEN}✓ No isolation violations found!{RESET}")
        return 0

    total_violations = sum(len(v) for v in all_violations.values())
    print(f"{RED}✗ Found {total_violations} isolation violations:{RESET}\n")

    for file_path, violations in sorted(all_violations.items()):
        try:
            rel_path = file_path.relative_to(project_root)
        except ValueError:
            rel_path = file_path

        print(f"{RED}{rel_path}{RESET}")
        for line_num, description in violations:
            print(f"  {line_num}: {description}")
        print()

    print(f"{RED}Core isolation check failed!{RESET}")
    print("\nThe scanning engine must not depend on the CLI layer or the process provider.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
