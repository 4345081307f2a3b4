"""Application entry point for fscan.

Exit Codes:
    0: Success
    1: Configuration error (e.g. the scan path does not exist) or abort
    2: Usage error
"""

from __future__ import annotations

from fscan.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Main entry point: dispatch to the click command group."""
    cli(prog_name="fscan")


if __name__ == "__main__":
    main()
