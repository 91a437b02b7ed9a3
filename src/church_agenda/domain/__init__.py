"""Domain models for the church calendar and venue bookings."""

from __future__ import annotations

from .calendar import CalendarDay, CalendarMonth
from .conflicts import ConflictDiagnostic, ConflictEntry
from .enums import AttendanceStatus, ConflictKind, EventStatus, HolidayType, ReservationStatus
from .models import Event, Holiday, Participant, Reservation, Venue, parse_records

__all__ = [
    "AttendanceStatus",
    "CalendarDay",
    "CalendarMonth",
    "ConflictDiagnostic",
    "ConflictEntry",
    "ConflictKind",
    "Event",
    "EventStatus",
    "Holiday",
    "HolidayType",
    "Participant",
    "Reservation",
    "ReservationStatus",
    "Venue",
    "parse_records",
]
