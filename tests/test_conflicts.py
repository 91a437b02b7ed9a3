"""Tests for the venue conflict detector."""

from datetime import date

import pytest

from church_agenda.core import check_conflicts, evaluate_conflicts
from church_agenda.domain import ConflictKind, EventStatus, ReservationStatus
from church_agenda.errors import AvailabilityCheckError, DataFetchError

from .conftest import FakeEventRepository, FakeReservationRepository, make_event, make_reservation

DAY = date(2025, 6, 1)


class Lookup:
    def __init__(self, events=(), reservations=(), *, fail_events=False, fail_reservations=False):
        self.events = FakeEventRepository(events, fail=fail_events)
        self.reservations = FakeReservationRepository(reservations, fail=fail_reservations)
        self.calls = []

    def confirmed_events_at(self, venue_id, day, exclude_event_id=None):
        self.calls.append("events")
        return self.events.confirmed_at(venue_id, day, exclude_event_id)

    def confirmed_reservations_at(self, venue_id, day):
        self.calls.append("reservations")
        return self.reservations.confirmed_at(venue_id, day)


def test_overlapping_event_is_reported():
    existing = make_event("e1", "Rehearsal", DAY, hours=("09:00", "10:00"))
    diagnostic = check_conflicts(Lookup([existing]), "hall", DAY, "09:30", "10:30")
    assert diagnostic.exists
    assert diagnostic.kind is ConflictKind.TIME
    assert [entry.event_id for entry in diagnostic.conflicts] == ["e1"]
    assert diagnostic.conflicts[0].start_time == "09:00"


def test_excluding_the_edited_event_avoids_self_conflict():
    existing = make_event("e1", "Rehearsal", DAY, hours=("09:00", "10:00"))
    diagnostic = check_conflicts(Lookup([existing]), "hall", DAY, "09:30", "10:30", exclude_event_id="e1")
    assert not diagnostic.exists
    assert diagnostic.kind is ConflictKind.NONE
    assert diagnostic.conflicts == []


def test_touching_boundaries_are_free():
    existing = make_event("e1", "Rehearsal", DAY, hours=("09:00", "10:00"))
    assert not check_conflicts(Lookup([existing]), "hall", DAY, "10:00", "11:00").exists
    assert not check_conflicts(Lookup([existing]), "hall", DAY, "08:00", "09:00").exists


def test_all_day_event_never_blocks_a_timed_slot():
    vigil = make_event("vigil", "Vigil", DAY, all_day=True)
    diagnostic = check_conflicts(Lookup([vigil]), "hall", DAY, "00:00", "23:59")
    assert not diagnostic.exists
    assert diagnostic.conflicts == []


def test_other_venues_dates_and_statuses_are_ignored():
    events = [
        make_event("other-venue", "Choir", DAY, hours=("09:00", "10:00"), venue_id="annex"),
        make_event("other-day", "Choir", date(2025, 6, 2), hours=("09:00", "10:00")),
        make_event("pending", "Choir", DAY, hours=("09:00", "10:00"), status=EventStatus.PENDING),
    ]
    reservations = [
        make_reservation("cancelled", "Ana", DAY, ("09:00", "10:00"), status=ReservationStatus.CANCELLED),
    ]
    assert not check_conflicts(Lookup(events, reservations), "hall", DAY, "09:00", "10:00").exists


def test_events_and_reservations_are_reported_together():
    events = [make_event("e1", "Service", DAY, hours=("18:00", "20:00"))]
    reservations = [make_reservation("r1", "Maria Souza", DAY, ("19:30", "21:00"))]
    lookup = Lookup(events, reservations)
    diagnostic = check_conflicts(lookup, "hall", DAY, "19:00", "21:00")
    assert [entry.name for entry in diagnostic.conflicts] == ["Service", "Maria Souza"]
    assert diagnostic.conflicts[1].reservation_id == "r1"
    assert diagnostic.conflicts[1].id == "r1"
    assert lookup.calls == ["events", "reservations"]


@pytest.mark.parametrize("fail_events,fail_reservations", [(True, False), (False, True)])
def test_lookup_failure_is_never_reported_as_available(fail_events, fail_reservations):
    lookup = Lookup(fail_events=fail_events, fail_reservations=fail_reservations)
    with pytest.raises(AvailabilityCheckError) as excinfo:
        check_conflicts(lookup, "hall", DAY, "09:00", "10:00")
    assert isinstance(excinfo.value, DataFetchError)
    assert "Could not verify availability" in str(excinfo.value)


def test_evaluate_conflicts_skips_records_without_times():
    untimed = make_event("e1", "Meeting", DAY)
    diagnostic = evaluate_conflicts(DAY, "09:00", "10:00", [untimed], [])
    assert not diagnostic.exists


def test_diagnostic_serialization_uses_stored_names():
    events = [make_event("e1", "Service", DAY, hours=("18:00", "20:00"))]
    payload = evaluate_conflicts(DAY, "19:00", "21:00", events, []).to_dict()
    assert payload["existe"] is True
    assert payload["tipo"] == "time"
    assert payload["conflitos"] == [
        {"nome": "Service", "data": "2025-06-01", "hora_inicio": "18:00", "hora_fim": "20:00", "evento_id": "e1"}
    ]
