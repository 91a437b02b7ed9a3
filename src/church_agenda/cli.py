from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .bootstrap import configure_logging
from .config import get_settings
from .domain import CalendarMonth, ConflictDiagnostic
from .errors import AgendaError
from .utils.dates import WEEKDAY_NAMES, format_time, month_name, parse_time


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings().server
    parser = argparse.ArgumentParser(description="Church Agenda command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the HTTP API server.")
    api_parser.add_argument("--host", default=settings.host)
    api_parser.add_argument("--port", type=int, default=settings.port)

    month_parser = subparsers.add_parser("month", help="Print the calendar grid of a month.")
    month_parser.add_argument("month", type=int, help="Month number, 1-12.")
    month_parser.add_argument("year", type=int)

    check_parser = subparsers.add_parser("check", help="Check a venue slot for conflicts.")
    check_parser.add_argument("venue_id")
    check_parser.add_argument("date", help="YYYY-MM-DD")
    check_parser.add_argument("start", help="HH:MM")
    check_parser.add_argument("end", help="HH:MM")
    check_parser.add_argument("--exclude", dest="exclude_event_id", default=None)

    return parser


def render_month(grid: CalendarMonth) -> str:
    lines = [f"{month_name(grid.month)} {grid.year}", " ".join(name[:3] for name in WEEKDAY_NAMES)]
    for week in grid.weeks():
        cells = []
        for day in week:
            marker = "*" if day.is_today else ("!" if day.events or day.reservations else " ")
            label = f"{day.day:2d}" if day.is_current_month else "  "
            cells.append(f"{label}{marker}")
        lines.append(" ".join(cells))
    for day in grid.current_month_days():
        if day.holiday:
            lines.append(f"{day.date}  {day.holiday.name}")
        for event in day.events:
            hours = "dia inteiro" if event.all_day else f"{format_time(event.start_time)}-{format_time(event.end_time)}"
            lines.append(f"{day.date}  {event.name} ({hours})")
        for reservation in day.reservations:
            hours = f"{format_time(reservation.start_time)}-{format_time(reservation.end_time)}"
            lines.append(f"{day.date}  reserva: {reservation.responsible_name} ({hours})")
    return "\n".join(lines)


def render_diagnostic(diagnostic: ConflictDiagnostic) -> str:
    lines = [diagnostic.message]
    for entry in diagnostic.conflicts:
        lines.append(f"  - {entry.name} {entry.date} {entry.start_time}-{entry.end_time}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    logger = logging.getLogger(__name__)
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.debug("Church Agenda CLI command: %s", args.command)

    if args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
        return 0

    from .api import api_state

    try:
        if args.command == "month":
            if not 1 <= args.month <= 12:
                parser.error("month must be between 1 and 12")
            grid = api_state.calendar.load_month(args.month - 1, args.year)
            print(render_month(grid))
            return 0
        if args.command == "check":
            start, end = parse_time(args.start), parse_time(args.end)
            if start >= end:
                raise ValueError("start must be before end")
            diagnostic = api_state.calendar.check_conflicts(
                args.venue_id, args.date, start, end, exclude_event_id=args.exclude_event_id
            )
            print(render_diagnostic(diagnostic))
            return 1 if diagnostic.exists else 0
    except (AgendaError, ValueError) as exc:
        logger.error("%s", exc)
        print(str(exc), file=sys.stderr)
        return 2
    parser.print_help()  # pragma: no cover - argparse enforces choices
    return 2


if __name__ == "__main__":
    sys.exit(main())
