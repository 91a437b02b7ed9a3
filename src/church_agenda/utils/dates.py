"""Calendar-date and time-of-day helpers.

All arithmetic works on local calendar dates (``datetime.date``) and never
goes through UTC, so an ISO string parsed and reformatted yields the same day.
Times of day are compared as minutes since midnight rather than as strings,
so ``"9:00"`` sorts before ``"10:00"``.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

DateLike = Union[date, datetime, str]
TimeLike = Union[time, str, int]

WEEKDAY_NAMES = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")
MONTH_NAMES = (
    "Janeiro",
    "Fevereiro",
    "Março",
    "Abril",
    "Maio",
    "Junho",
    "Julho",
    "Agosto",
    "Setembro",
    "Outubro",
    "Novembro",
    "Dezembro",
)

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^\s*(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.\d+)?)?\s*$")


def format_iso_date(value: date) -> str:
    """Return ``YYYY-MM-DD`` for the calendar date of ``value``."""

    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(value: DateLike) -> date:
    """Parse a date-only value, stripping any time-of-day component.

    Timestamps such as ``2025-03-30T18:00:00`` keep their written calendar
    date; no timezone shift is applied.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError as exc:
            raise ValueError(f"Invalid ISO date: {value!r}") from exc
    raise ValueError(f"Unsupported date value: {value!r}")


def coerce_date(value: Optional[DateLike]) -> Optional[date]:
    """Like :func:`parse_date` but returns ``None`` for missing or malformed input."""

    if value is None or value == "":
        return None
    try:
        return parse_date(value)
    except ValueError:
        return None


def parse_time(value: TimeLike) -> time:
    if isinstance(value, time):
        return value.replace(tzinfo=None)
    if isinstance(value, int):
        if not 0 <= value < MINUTES_PER_DAY:
            raise ValueError(f"Minutes out of range: {value}")
        return time(hour=value // 60, minute=value % 60)
    if isinstance(value, str):
        match = _TIME_PATTERN.match(value)
        if not match:
            raise ValueError(f"Invalid time of day: {value!r}")
        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        try:
            return time(hour=hour, minute=minute, second=second)
        except ValueError as exc:
            raise ValueError(f"Invalid time of day: {value!r}") from exc
    raise ValueError(f"Unsupported time value: {value!r}")


def coerce_time(value: Optional[TimeLike]) -> Optional[time]:
    if value is None or value == "":
        return None
    try:
        return parse_time(value)
    except ValueError:
        return None


def time_to_minutes(value: TimeLike) -> int:
    """Minutes since midnight; seconds are truncated."""

    if isinstance(value, int) and not isinstance(value, bool):
        parse_time(value)
        return value
    parsed = parse_time(value)
    return parsed.hour * 60 + parsed.minute


def format_time(value: Optional[TimeLike]) -> str:
    """Return ``HH:MM`` or an empty string when there is no time."""

    if value is None or value == "":
        return ""
    parsed = parse_time(value)
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def format_date_br(value: Optional[DateLike]) -> str:
    parsed = coerce_date(value)
    if parsed is None:
        return ""
    return f"{parsed.day:02d}/{parsed.month:02d}/{parsed.year:04d}"


def format_date_time_br(value: DateLike, hour: Optional[TimeLike] = None) -> str:
    formatted = format_date_br(value)
    if not hour:
        return formatted
    return f"{formatted} às {format_time(hour)}"


def same_day(first: DateLike, second: DateLike) -> bool:
    return parse_date(first) == parse_date(second)


def date_in_range(target: DateLike, start: DateLike, end: Optional[DateLike] = None) -> bool:
    """True when ``start <= target <= end``; a missing end means a single day."""

    day = parse_date(target)
    first = parse_date(start)
    last = parse_date(end) if end else first
    return first <= day <= last


def days_between_inclusive(start: DateLike, end: DateLike) -> int:
    """Number of calendar dates covered by ``start`` and ``end``, both counted."""

    delta = abs(parse_date(end) - parse_date(start))
    return math.ceil(delta / timedelta(days=1)) + 1


def duration_hours(start: Optional[TimeLike], end: Optional[TimeLike]) -> float:
    if not start or not end:
        return 0.0
    return (time_to_minutes(end) - time_to_minutes(start)) / 60


def sunday_weekday(value: DateLike) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""

    return (parse_date(value).weekday() + 1) % 7


def weekday_name(value: DateLike) -> str:
    return WEEKDAY_NAMES[sunday_weekday(value)]


def month_name(month: int) -> str:
    """Name for a zero-based month index (0 = January)."""

    if not 0 <= month <= 11:
        raise ValueError("month must be between 0 and 11")
    return MONTH_NAMES[month]


def shift_month(month: int, year: int, delta: int) -> tuple[int, int]:
    """Move a zero-based ``(month, year)`` pair by ``delta`` months."""

    absolute = year * 12 + month + delta
    return absolute % 12, absolute // 12


def add_months(value: DateLike, months: int) -> date:
    """Shift a date by whole months, clamping the day to the target month's length."""

    day = parse_date(value)
    month, year = shift_month(day.month - 1, day.year, months)
    return date(year, month + 1, min(day.day, days_in_month(month, year)))


def days_in_month(month: int, year: int) -> int:
    """Length of a zero-based month."""

    next_month, next_year = shift_month(month, year, 1)
    return (date(next_year, next_month + 1, 1) - date(year, month + 1, 1)).days


def intervals_overlap(
    first_start: TimeLike,
    first_end: TimeLike,
    second_start: TimeLike,
    second_end: TimeLike,
) -> bool:
    """Half-open overlap test for two same-day intervals.

    Touching boundaries (one ends exactly when the other starts) do not
    overlap. Both intervals are assumed to satisfy ``start < end`` within a
    single day; intervals crossing midnight are not supported.
    """

    a_start = time_to_minutes(first_start)
    a_end = time_to_minutes(first_end)
    b_start = time_to_minutes(second_start)
    b_end = time_to_minutes(second_end)
    return not (a_end <= b_start or a_start >= b_end)


__all__ = [
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "add_months",
    "coerce_date",
    "coerce_time",
    "date_in_range",
    "days_between_inclusive",
    "days_in_month",
    "duration_hours",
    "format_date_br",
    "format_date_time_br",
    "format_iso_date",
    "format_time",
    "intervals_overlap",
    "month_name",
    "parse_date",
    "parse_time",
    "same_day",
    "shift_month",
    "sunday_weekday",
    "time_to_minutes",
    "weekday_name",
]
