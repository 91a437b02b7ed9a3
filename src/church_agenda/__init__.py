"""Church Agenda: month calendar and venue conflict detection."""

from __future__ import annotations

from .core import build_month, check_conflicts

__all__ = ["build_month", "check_conflicts", "main"]


def main() -> int:
    from .cli import main as cli_main

    return cli_main()
