"""Month grid construction.

The grid is always 42 cells (six weeks) starting on a Sunday. Each cell
lists the holiday, events and reservations that fall on its date; a
multi-day event appears, as the same object, on every date it spans.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence

from ..domain import CalendarDay, CalendarMonth, Event, Holiday, Reservation
from ..utils.dates import coerce_date, days_in_month, format_iso_date, sunday_weekday

logger = logging.getLogger(__name__)

GRID_DAYS = 42


def event_span(event: Event) -> Optional[tuple[date, date]]:
    """Inclusive ``(first, last)`` dates of an event, or ``None`` if its dates are unusable."""

    start = coerce_date(event.start_date)
    if start is None:
        return None
    end = coerce_date(event.end_date) if event.end_date else start
    if end is None:
        return None
    return start, end


def events_on(target: date, events: Sequence[Event]) -> List[Event]:
    matches: list[Event] = []
    for event in events:
        span = event_span(event)
        if span and span[0] <= target <= span[1]:
            matches.append(event)
    return matches


def reservations_on(target: date, reservations: Sequence[Reservation]) -> List[Reservation]:
    return [item for item in reservations if coerce_date(item.reservation_date) == target]


def holiday_on(target: date, holidays: Sequence[Holiday]) -> Optional[Holiday]:
    exact = next((item for item in holidays if coerce_date(item.holiday_date) == target), None)
    if exact is not None:
        return exact
    return next((item for item in holidays if item.recurring and item.matches(target)), None)


def grid_dates(month: int, year: int) -> List[date]:
    """The 42 dates shown for a zero-based ``month``, Sunday first."""

    if not 0 <= month <= 11:
        raise ValueError("month must be between 0 and 11")
    first = date(year, month + 1, 1)
    grid_start = first - timedelta(days=sunday_weekday(first))
    return [grid_start + timedelta(days=offset) for offset in range(GRID_DAYS)]


def _usable(records: Sequence, attribute: str, label: str) -> list:
    usable = []
    for record in records:
        if coerce_date(getattr(record, attribute)) is None:
            logger.warning("Skipping %s %s with unusable date", label, getattr(record, "id", "?"))
            continue
        usable.append(record)
    return usable


def build_month(
    month: int,
    year: int,
    holidays: Sequence[Holiday] = (),
    events: Sequence[Event] = (),
    reservations: Sequence[Reservation] = (),
    *,
    today: Optional[date] = None,
) -> CalendarMonth:
    """Build the calendar grid for a zero-based ``month`` of ``year``.

    ``today`` is the caller's reference date for the "today" marker and
    defaults to the local current date. Inputs are never mutated and no
    state is kept between calls.
    """

    reference = coerce_date(today) if today is not None else date.today()
    dated_events = [event for event in events if event_span(event) is not None]
    if len(dated_events) != len(events):
        logger.warning("Skipping %d event(s) with unusable dates", len(events) - len(dated_events))
    dated_reservations = _usable(reservations, "reservation_date", "reservation")

    days: list[CalendarDay] = []
    for current in grid_dates(month, year):
        days.append(
            CalendarDay(
                date=format_iso_date(current),
                day=current.day,
                month=current.month - 1,
                year=current.year,
                is_current_month=current.month - 1 == month and current.year == year,
                is_today=current == reference,
                holiday=holiday_on(current, holidays),
                events=events_on(current, dated_events),
                reservations=reservations_on(current, dated_reservations),
            )
        )

    logger.debug(
        "Built %04d-%02d grid: %d day(s) in month, %d event(s), %d reservation(s)",
        year,
        month + 1,
        days_in_month(month, year),
        len(dated_events),
        len(dated_reservations),
    )
    return CalendarMonth(month=month, year=year, days=days)


__all__ = [
    "GRID_DAYS",
    "build_month",
    "event_span",
    "events_on",
    "grid_dates",
    "holiday_on",
    "reservations_on",
]
