"""Tests for the calendar service flows: loading months, saving events, booking venues."""

from datetime import date, time

import pytest

from church_agenda.domain import Reservation, ReservationStatus
from church_agenda.errors import AvailabilityCheckError, DataFetchError, SchedulingConflictError

from .conftest import FakeEventRepository, FakeReservationRepository, make_event


def _booking(start: str, end: str) -> Reservation:
    return Reservation(
        id="",
        venue_id="hall",
        reservation_date=date(2025, 6, 1),
        start_time=time.fromisoformat(start),
        end_time=time.fromisoformat(end),
        responsible_name="Maria Souza",
        status=ReservationStatus.PENDING,
    )


def test_load_month_builds_grid_from_all_sources(calendar_service):
    grid = calendar_service.load_month(5, 2025, today=date(2025, 6, 1))
    first = grid.days[0]
    assert first.date == "2025-06-01"
    assert first.is_today
    assert [event.name for event in first.events] == ["Service"]
    assert any(day.holiday and day.holiday.name == "Corpus Christi" for day in grid.days)


def test_load_month_refuses_partial_inputs(calendar_service, context):
    context.reservations = FakeReservationRepository(fail=True)
    with pytest.raises(DataFetchError):
        calendar_service.load_month(5, 2025)


def test_today_uses_configured_timezone(calendar_service):
    assert isinstance(calendar_service.today(), date)


def test_reservation_overlapping_service_is_rejected(calendar_service, context):
    with pytest.raises(SchedulingConflictError) as excinfo:
        calendar_service.create_reservation(_booking("19:00", "21:00"), created_by="user-1")
    diagnostic = excinfo.value.diagnostic
    assert diagnostic.kind.value == "time"
    assert [entry.name for entry in diagnostic.conflicts] == ["Service"]
    assert context.reservations.reservations == []


def test_reservation_after_service_is_accepted(calendar_service, context):
    assert not calendar_service.check_conflicts("hall", "2025-06-01", "20:00", "22:00").exists
    saved = calendar_service.create_reservation(_booking("20:00", "22:00"), created_by="user-1")
    assert saved.id
    assert saved.status is ReservationStatus.CONFIRMED
    assert saved.created_by == "user-1"
    assert len(context.reservations.reservations) == 1

    # The new booking now blocks the same slot.
    with pytest.raises(SchedulingConflictError):
        calendar_service.create_reservation(_booking("21:00", "21:30"), created_by="user-2")


def test_reservation_lookup_failure_blocks_booking(calendar_service, context):
    context.events = FakeEventRepository(fail=True)
    with pytest.raises(AvailabilityCheckError):
        calendar_service.create_reservation(_booking("08:00", "09:00"), created_by="user-1")
    assert context.reservations.reservations == []


def test_save_new_event_checks_slot(calendar_service, context):
    clash = make_event("", "Choir", date(2025, 6, 1), hours=("19:00", "19:30"))
    with pytest.raises(SchedulingConflictError) as excinfo:
        calendar_service.save_event(clash, created_by="user-1")
    assert "Service" in str(excinfo.value)

    later = make_event("", "Choir", date(2025, 6, 1), hours=("20:00", "21:00"))
    saved = calendar_service.save_event(later, created_by="user-1", participant_ids=["p1", "p2"])
    assert saved.id
    assert saved.created_by == "user-1"
    assert [participant.person_id for participant in saved.participants] == ["p1", "p2"]
    assert context.events.participants[saved.id] == ["p1", "p2"]


def test_editing_event_does_not_conflict_with_itself(calendar_service, context, service_event):
    moved = make_event("", "Service", date(2025, 6, 1), hours=("18:30", "20:30"))
    saved = calendar_service.save_event(moved, created_by="user-1", editing_id=service_event.id)
    assert saved.id == service_event.id
    assert context.events.events[0].start_time == time(18, 30)


def test_all_day_event_skips_conflict_check(calendar_service, context):
    context.events = FakeEventRepository([make_event("e1", "Service", date(2025, 6, 1), hours=("18:00", "20:00"))])
    vigil = make_event("", "Vigil", date(2025, 6, 1), all_day=True)
    saved = calendar_service.save_event(vigil, created_by="user-1")
    assert saved.all_day
    assert len(context.events.events) == 2


def test_delete_event(calendar_service, context, service_event):
    assert calendar_service.delete_event(service_event.id)
    assert not calendar_service.delete_event(service_event.id)


def test_list_for_day_expands_multi_day_events(calendar_service, context):
    context.events.events.append(make_event("retreat", "Retreat", date(2025, 5, 30), date(2025, 6, 2), all_day=True))
    events, reservations = calendar_service.list_for_day("2025-06-01")
    assert {event.id for event in events} == {"evt-service", "retreat"}
    assert reservations == []


def test_venue_service_lists_only_active(venue_service):
    assert [venue.name for venue in venue_service.list_active()] == ["Main Hall"]
