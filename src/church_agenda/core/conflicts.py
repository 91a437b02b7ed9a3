"""Venue conflict detection.

A candidate slot ``(venue, date, start, end)`` conflicts with an existing
confirmed event or confirmed reservation at the same venue and date when
their time intervals overlap (half-open, so touching boundaries are fine).
Records without both a start and an end time, such as all-day events, never
take part in the overlap test.
"""

from __future__ import annotations

import logging
from datetime import date, time
from typing import List, Optional, Protocol, Sequence

from ..domain import ConflictDiagnostic, ConflictEntry, ConflictKind, Event, Reservation
from ..errors import AvailabilityCheckError
from ..utils.dates import DateLike, TimeLike, format_iso_date, format_time, intervals_overlap, parse_date

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "There is a time conflict with another event or reservation."
NO_CONFLICT_MESSAGE = "No conflicts."


class ConflictLookup(Protocol):
    """Read access to the confirmed bookings of one venue on one date."""

    def confirmed_events_at(
        self, venue_id: str, day: date, exclude_event_id: Optional[str] = None
    ) -> Sequence[Event]:
        ...

    def confirmed_reservations_at(self, venue_id: str, day: date) -> Sequence[Reservation]:
        ...


def _overlaps(start: TimeLike, end: TimeLike, other_start: Optional[time], other_end: Optional[time]) -> bool:
    if other_start is None or other_end is None:
        return False
    return intervals_overlap(other_start, other_end, start, end)


def _event_entry(event: Event, fallback_day: date) -> ConflictEntry:
    return ConflictEntry(
        event_id=event.id,
        name=event.name,
        date=format_iso_date(event.start_date or fallback_day),
        start_time=format_time(event.start_time),
        end_time=format_time(event.end_time),
    )


def _reservation_entry(reservation: Reservation, fallback_day: date) -> ConflictEntry:
    return ConflictEntry(
        reservation_id=reservation.id,
        name=reservation.responsible_name,
        date=format_iso_date(reservation.reservation_date or fallback_day),
        start_time=format_time(reservation.start_time),
        end_time=format_time(reservation.end_time),
    )


def evaluate_conflicts(
    day: DateLike,
    start: TimeLike,
    end: TimeLike,
    events: Sequence[Event],
    reservations: Sequence[Reservation],
) -> ConflictDiagnostic:
    """Overlap test of a candidate slot against already-filtered bookings.

    ``events`` and ``reservations`` must already be restricted to confirmed
    records of the candidate's venue and date. The candidate is assumed to
    satisfy ``start < end`` on a single day.
    """

    target = parse_date(day)
    clashing_events = [
        event
        for event in events
        if not event.all_day and _overlaps(start, end, event.start_time, event.end_time)
    ]
    clashing_reservations = [
        reservation
        for reservation in reservations
        if _overlaps(start, end, reservation.start_time, reservation.end_time)
    ]

    conflicts: List[ConflictEntry] = [_event_entry(event, target) for event in clashing_events]
    conflicts.extend(_reservation_entry(reservation, target) for reservation in clashing_reservations)
    exists = bool(conflicts)
    return ConflictDiagnostic(
        exists=exists,
        kind=ConflictKind.TIME if exists else ConflictKind.NONE,
        message=CONFLICT_MESSAGE if exists else NO_CONFLICT_MESSAGE,
        conflicts=conflicts,
    )


def check_conflicts(
    lookup: ConflictLookup,
    venue_id: str,
    day: DateLike,
    start: TimeLike,
    end: TimeLike,
    exclude_event_id: Optional[str] = None,
) -> ConflictDiagnostic:
    """Query both booking sources and report every overlap at once.

    Any lookup failure raises :class:`AvailabilityCheckError`; a failed
    lookup is never reported as a free slot.
    """

    target = parse_date(day)
    try:
        events = list(lookup.confirmed_events_at(venue_id, target, exclude_event_id))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Event lookup failed for venue %s on %s", venue_id, target)
        raise AvailabilityCheckError("events") from exc
    try:
        reservations = list(lookup.confirmed_reservations_at(venue_id, target))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Reservation lookup failed for venue %s on %s", venue_id, target)
        raise AvailabilityCheckError("reservations") from exc

    if exclude_event_id:
        events = [event for event in events if event.id != exclude_event_id]

    diagnostic = evaluate_conflicts(target, start, end, events, reservations)
    if diagnostic.exists:
        logger.info(
            "Conflict at venue %s on %s %s-%s: %s",
            venue_id,
            target,
            format_time(start),
            format_time(end),
            ", ".join(entry.name for entry in diagnostic.conflicts),
        )
    return diagnostic


__all__ = [
    "CONFLICT_MESSAGE",
    "NO_CONFLICT_MESSAGE",
    "ConflictLookup",
    "check_conflicts",
    "evaluate_conflicts",
]
