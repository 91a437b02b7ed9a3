from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..utils.dates import format_iso_date, month_name, parse_date, parse_time
from .models import EventInput, ReservationInput
from .registry import register_api
from .serializers import serialize_event, serialize_reservation, serialize_venue
from .state import api_state


def _parse_date(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value}") from exc


@register_api(
    "calendar_month",
    description="Build the six-week grid for a zero-based month with its events, reservations and holidays.",
    category="calendar",
    tags=("read", "grid"),
)
def calendar_month(month: int, year: int, today: Optional[str] = None) -> Dict[str, Any]:
    reference = _parse_date(today) if today else None
    grid = api_state.calendar.load_month(month, year, today=reference)
    payload = grid.to_dict()
    payload["nome_mes"] = month_name(month)
    return payload


@register_api(
    "events_for_day",
    description="Return the events and reservations that fall on a specific day.",
    category="calendar",
    tags=("read",),
)
def events_for_day(day: str) -> Dict[str, Any]:
    target = _parse_date(day)
    events, reservations = api_state.calendar.list_for_day(target)
    return {
        "day": format_iso_date(target),
        "events": [serialize_event(event) for event in events],
        "reservations": [serialize_reservation(reservation) for reservation in reservations],
    }


@register_api(
    "check_conflicts",
    description="Check whether a venue slot overlaps confirmed events or reservations on that date.",
    category="booking",
    tags=("read", "conflicts"),
)
def check_conflicts(
    venue_id: str,
    day: str,
    start_time: str,
    end_time: str,
    exclude_event_id: Optional[str] = None,
) -> Dict[str, Any]:
    start = parse_time(start_time)
    end = parse_time(end_time)
    if start >= end:
        raise ValueError("start_time must be before end_time")
    diagnostic = api_state.calendar.check_conflicts(
        venue_id,
        _parse_date(day),
        start,
        end,
        exclude_event_id=exclude_event_id,
    )
    return diagnostic.to_dict()


@register_api(
    "save_event",
    description="Create an event, or update it when event_id is given, after checking its venue slot.",
    category="calendar",
    tags=("write",),
)
def save_event(event: Dict[str, Any], created_by: str, event_id: Optional[str] = None) -> Dict[str, Any]:
    payload = EventInput.model_validate(event)
    saved = api_state.calendar.save_event(
        payload.to_domain(event_id or ""),
        created_by=created_by,
        editing_id=event_id,
        participant_ids=payload.participant_ids,
    )
    return {"event": serialize_event(saved)}


@register_api(
    "delete_event",
    description="Delete an event permanently.",
    category="calendar",
    tags=("write",),
)
def delete_event(event_id: str) -> Dict[str, Any]:
    deleted = api_state.calendar.delete_event(event_id)
    if not deleted:
        raise ValueError(f"Event '{event_id}' not found.")
    return {"deleted": event_id}


@register_api(
    "create_reservation",
    description="Book a venue for a time slot on one date, refusing overlapping bookings.",
    category="booking",
    tags=("write",),
)
def create_reservation(reservation: Dict[str, Any], created_by: str) -> Dict[str, Any]:
    payload = ReservationInput.model_validate(reservation)
    saved = api_state.calendar.create_reservation(payload.to_domain(), created_by=created_by)
    return {"reservation": serialize_reservation(saved)}


@register_api(
    "list_venues",
    description="List active venues that can be booked.",
    category="venues",
    tags=("read",),
)
def list_venues() -> Dict[str, List[dict]]:
    return {"venues": [serialize_venue(venue) for venue in api_state.venues.list_active()]}
