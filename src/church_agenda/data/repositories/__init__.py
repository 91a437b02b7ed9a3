"""Supabase repositories for first-class domain objects."""

from __future__ import annotations

from .events import EventRepository
from .holidays import HolidayRepository
from .lookup import RepositoryConflictLookup
from .reservations import ReservationRepository
from .venues import VenueRepository

__all__ = [
    "EventRepository",
    "HolidayRepository",
    "RepositoryConflictLookup",
    "ReservationRepository",
    "VenueRepository",
]
