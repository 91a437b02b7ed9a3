from __future__ import annotations

from typing import Any, Dict

from ..domain import Event, Reservation, Venue


def serialize_event(event: Event) -> Dict[str, Any]:
    payload = event.to_record()
    payload["espaco"] = event.venue.to_record() if event.venue else None
    payload["participantes"] = [
        {
            "pessoa_id": participant.person_id,
            "confirmacao_presenca": participant.attendance.value,
            "nome_completo": participant.person_name,
        }
        for participant in event.participants
    ]
    return payload


def serialize_reservation(reservation: Reservation) -> Dict[str, Any]:
    payload = reservation.to_record()
    payload["espaco"] = reservation.venue.to_record() if reservation.venue else None
    return payload


def serialize_venue(venue: Venue) -> Dict[str, Any]:
    return venue.to_record()
