from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Iterable, Optional
from uuid import uuid4
from zoneinfo import ZoneInfo

from ..core import build_month, check_conflicts, events_on, reservations_on
from ..domain import CalendarMonth, ConflictDiagnostic, Event, Reservation, ReservationStatus
from ..errors import SchedulingConflictError
from ..utils.dates import DateLike, TimeLike, parse_date
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    def today(self) -> date:
        """Current date in the configured calendar timezone."""

        return datetime.now(ZoneInfo(self.context.settings.calendar.timezone)).date()

    def _load_all(self) -> tuple[list, list, list]:
        # All three sets must load before a grid is built; any failure propagates.
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="agenda-load") as pool:
            events = pool.submit(self.context.events.list_events)
            reservations = pool.submit(self.context.reservations.list_reservations)
            holidays = pool.submit(self.context.holidays.list_holidays)
            return events.result(), reservations.result(), holidays.result()

    def load_month(self, month: int, year: int, *, today: Optional[date] = None) -> CalendarMonth:
        events, reservations, holidays = self._load_all()
        logger.info(
            "Loaded %d event(s), %d reservation(s), %d holiday(s) for %04d-%02d",
            len(events),
            len(reservations),
            len(holidays),
            year,
            month + 1,
        )
        return build_month(month, year, holidays, events, reservations, today=today or self.today())

    def list_for_day(self, day: DateLike) -> tuple[list[Event], list[Reservation]]:
        target = parse_date(day)
        events, reservations, _ = self._load_all()
        return events_on(target, events), reservations_on(target, reservations)

    def check_conflicts(
        self,
        venue_id: str,
        day: DateLike,
        start: TimeLike,
        end: TimeLike,
        exclude_event_id: Optional[str] = None,
    ) -> ConflictDiagnostic:
        return check_conflicts(self.context.conflict_lookup, venue_id, day, start, end, exclude_event_id)

    def save_event(
        self,
        event: Event,
        *,
        created_by: str,
        editing_id: Optional[str] = None,
        participant_ids: Optional[Iterable[str]] = None,
    ) -> Event:
        """Create or update an event after checking its venue slot.

        Only time-scoped events with a venue are checked; all-day events are
        saved without a conflict check. ``participant_ids`` replaces the
        participant list when given.
        """

        if event.venue_id and event.is_time_scoped and event.start_date:
            diagnostic = self.check_conflicts(
                event.venue_id,
                event.start_date,
                event.start_time,
                event.end_time,
                exclude_event_id=editing_id,
            )
            if diagnostic.exists:
                raise SchedulingConflictError(diagnostic)

        if editing_id:
            saved = self.context.events.update(replace(event, id=editing_id))
            logger.info("Updated event %s (%s)", saved.id, saved.name)
        else:
            payload = replace(event, id=event.id or str(uuid4()), created_by=created_by)
            saved = self.context.events.insert(payload)
            logger.info("Created event %s (%s)", saved.id, saved.name)

        if participant_ids is not None:
            saved.participants = self.context.events.replace_participants(saved.id, list(participant_ids))
        return saved

    def delete_event(self, event_id: str) -> bool:
        deleted = self.context.events.delete(event_id)
        if deleted:
            logger.info("Deleted event %s", event_id)
        return deleted

    def create_reservation(self, reservation: Reservation, *, created_by: str) -> Reservation:
        """Check the slot, then insert the booking as confirmed.

        The check and the insert are not isolated from other writers: two
        overlapping bookings submitted at the same moment can both pass.
        """

        diagnostic = self.check_conflicts(
            reservation.venue_id,
            reservation.reservation_date,
            reservation.start_time,
            reservation.end_time,
        )
        if diagnostic.exists:
            raise SchedulingConflictError(diagnostic)
        payload = replace(
            reservation,
            id=reservation.id or str(uuid4()),
            status=ReservationStatus.CONFIRMED,
            created_by=created_by,
        )
        saved = self.context.reservations.insert(payload)
        logger.info("Created reservation %s for venue %s on %s", saved.id, saved.venue_id, saved.reservation_date)
        return saved
