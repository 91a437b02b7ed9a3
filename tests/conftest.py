from __future__ import annotations

from dataclasses import replace
from datetime import date, time
from typing import Iterable, List, Optional

import pytest

from church_agenda.config import get_settings
from church_agenda.domain import (
    Event,
    EventStatus,
    Holiday,
    HolidayType,
    Participant,
    Reservation,
    ReservationStatus,
    Venue,
)
from church_agenda.errors import DataFetchError
from church_agenda.services import CalendarService, ServiceContext, VenueService


def make_event(
    event_id: str,
    name: str,
    start: date,
    end: Optional[date] = None,
    *,
    hours: Optional[tuple[str, str]] = None,
    venue_id: Optional[str] = "hall",
    status: EventStatus = EventStatus.CONFIRMED,
    all_day: bool = False,
) -> Event:
    start_time = end_time = None
    if hours:
        start_time = time.fromisoformat(hours[0])
        end_time = time.fromisoformat(hours[1])
    return Event(
        id=event_id,
        name=name,
        start_date=start,
        end_date=end,
        start_time=start_time,
        end_time=end_time,
        all_day=all_day,
        venue_id=venue_id,
        status=status,
    )


def make_reservation(
    reservation_id: str,
    responsible: str,
    day: date,
    hours: tuple[str, str],
    *,
    venue_id: str = "hall",
    status: ReservationStatus = ReservationStatus.CONFIRMED,
) -> Reservation:
    return Reservation(
        id=reservation_id,
        venue_id=venue_id,
        reservation_date=day,
        start_time=time.fromisoformat(hours[0]),
        end_time=time.fromisoformat(hours[1]),
        responsible_name=responsible,
        status=status,
    )


class FakeEventRepository:
    def __init__(self, events: Iterable[Event] = (), *, fail: bool = False) -> None:
        self.events: List[Event] = list(events)
        self.fail = fail
        self.participants: dict[str, list[str]] = {}

    def _guard(self) -> None:
        if self.fail:
            raise DataFetchError("events")

    def list_events(self) -> List[Event]:
        self._guard()
        return list(self.events)

    def confirmed_at(self, venue_id: str, day: date, exclude_event_id: Optional[str] = None) -> List[Event]:
        self._guard()
        return [
            event
            for event in self.events
            if event.venue_id == venue_id
            and event.start_date == day
            and event.status is EventStatus.CONFIRMED
            and event.id != exclude_event_id
        ]

    def insert(self, event: Event) -> Event:
        self._guard()
        self.events.append(event)
        return event

    def update(self, event: Event) -> Event:
        self._guard()
        self.events = [event if item.id == event.id else item for item in self.events]
        return event

    def delete(self, event_id: str) -> bool:
        self._guard()
        before = len(self.events)
        self.events = [item for item in self.events if item.id != event_id]
        return len(self.events) != before

    def replace_participants(self, event_id: str, person_ids: Iterable[str]) -> List[Participant]:
        ids = list(person_ids)
        self.participants[event_id] = ids
        return [Participant(person_id=person_id, event_id=event_id) for person_id in ids]


class FakeReservationRepository:
    def __init__(self, reservations: Iterable[Reservation] = (), *, fail: bool = False) -> None:
        self.reservations: List[Reservation] = list(reservations)
        self.fail = fail

    def list_reservations(self) -> List[Reservation]:
        if self.fail:
            raise DataFetchError("reservations")
        return list(self.reservations)

    def confirmed_at(self, venue_id: str, day: date) -> List[Reservation]:
        if self.fail:
            raise DataFetchError("reservations")
        return [
            item
            for item in self.reservations
            if item.venue_id == venue_id
            and item.reservation_date == day
            and item.status is ReservationStatus.CONFIRMED
        ]

    def insert(self, reservation: Reservation) -> Reservation:
        self.reservations.append(reservation)
        return replace(reservation)


class FakeHolidayRepository:
    def __init__(self, holidays: Iterable[Holiday] = ()) -> None:
        self.holidays = list(holidays)

    def list_holidays(self) -> List[Holiday]:
        return list(self.holidays)


class FakeVenueRepository:
    def __init__(self, venues: Iterable[Venue] = ()) -> None:
        self.venues = list(venues)

    def list_active(self) -> List[Venue]:
        return [venue for venue in self.venues if venue.active]


@pytest.fixture
def service_event():
    return make_event("evt-service", "Service", date(2025, 6, 1), hours=("18:00", "20:00"))


@pytest.fixture
def context(service_event) -> ServiceContext:
    ctx = ServiceContext(settings=get_settings())
    ctx.events = FakeEventRepository([service_event])
    ctx.reservations = FakeReservationRepository()
    ctx.holidays = FakeHolidayRepository(
        [Holiday(id="h1", holiday_date=date(2025, 6, 19), name="Corpus Christi", kind=HolidayType.RELIGIOUS)]
    )
    ctx.venues = FakeVenueRepository(
        [
            Venue(id="hall", name="Main Hall", capacity=300),
            Venue(id="annex", name="Annex", active=False),
        ]
    )
    return ctx


@pytest.fixture
def calendar_service(context) -> CalendarService:
    return CalendarService(context)


@pytest.fixture
def venue_service(context) -> VenueService:
    return VenueService(context)


@pytest.fixture
def patched_state(monkeypatch, context):
    from church_agenda.api import api_state

    for name in ("events", "reservations", "holidays", "venues"):
        monkeypatch.setattr(api_state.context, name, getattr(context, name))
    return api_state
