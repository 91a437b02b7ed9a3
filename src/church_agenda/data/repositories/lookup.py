from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ...domain import Event, Reservation
from .events import EventRepository
from .reservations import ReservationRepository


@dataclass(slots=True)
class RepositoryConflictLookup:
    """Feeds the conflict detector from the Supabase repositories."""

    events: EventRepository
    reservations: ReservationRepository

    def confirmed_events_at(self, venue_id: str, day: date, exclude_event_id: Optional[str] = None) -> List[Event]:
        return self.events.confirmed_at(venue_id, day, exclude_event_id)

    def confirmed_reservations_at(self, venue_id: str, day: date) -> List[Reservation]:
        return self.reservations.confirmed_at(venue_id, day)
