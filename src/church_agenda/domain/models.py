from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from ..utils.dates import coerce_date, coerce_time, format_iso_date, format_time
from .enums import AttendanceStatus, EventStatus, HolidayType, ReservationStatus

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _record_date(record: Dict[str, Any], key: str) -> Optional[date]:
    raw = record.get(key)
    parsed = coerce_date(raw)
    if raw not in (None, "") and parsed is None:
        logger.warning("Ignoring malformed %s=%r on record %s", key, raw, record.get("id"))
    return parsed


def _record_time(record: Dict[str, Any], key: str) -> Optional[time]:
    raw = record.get(key)
    parsed = coerce_time(raw)
    if raw not in (None, "") and parsed is None:
        logger.warning("Ignoring malformed %s=%r on record %s", key, raw, record.get("id"))
    return parsed


def parse_records(records: Iterable[Dict[str, Any]], factory: Callable[[Dict[str, Any]], T], resource: str) -> List[T]:
    """Map stored rows with ``factory``, dropping rows it cannot read.

    Unknown status or type literals and missing keys are logged and the row is
    skipped, so one bad row never hides the rest of the set.
    """

    items: List[T] = []
    for record in records:
        try:
            items.append(factory(record))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping unreadable %s record %s: %s", resource, record.get("id"), exc)
    return items


def _iso(value: Optional[date]) -> Optional[str]:
    return format_iso_date(value) if value else None


def _hhmm(value: Optional[time]) -> Optional[str]:
    return format_time(value) if value else None


@dataclass(slots=True)
class Venue:
    id: str
    name: str
    capacity: Optional[int] = None
    location: str = ""
    description: str = ""
    equipment: List[str] = field(default_factory=list)
    active: bool = True

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Venue":
        capacity = record.get("capacidade")
        return cls(
            id=str(record["id"]),
            name=str(record.get("nome") or ""),
            capacity=int(capacity) if capacity is not None else None,
            location=record.get("localizacao") or "",
            description=record.get("descricao") or "",
            equipment=list(record.get("equipamentos") or []),
            active=bool(record.get("ativo", True)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nome": self.name,
            "capacidade": self.capacity,
            "localizacao": self.location,
            "descricao": self.description,
            "equipamentos": self.equipment,
            "ativo": self.active,
        }


@dataclass(slots=True)
class Participant:
    person_id: str
    attendance: AttendanceStatus = AttendanceStatus.PENDING
    id: Optional[str] = None
    event_id: Optional[str] = None
    person_name: Optional[str] = None
    person_email: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Participant":
        person = record.get("pessoa") or {}
        return cls(
            id=str(record["id"]) if record.get("id") else None,
            event_id=record.get("evento_id"),
            person_id=str(record["pessoa_id"]),
            attendance=AttendanceStatus(record.get("confirmacao_presenca") or AttendanceStatus.PENDING),
            person_name=person.get("nome_completo"),
            person_email=person.get("email"),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "evento_id": self.event_id,
            "pessoa_id": self.person_id,
            "confirmacao_presenca": self.attendance.value,
        }


@dataclass(slots=True)
class Event:
    """A scheduled church activity.

    ``start_date`` is ``None`` only when the stored value could not be
    parsed; such events are never placed on the calendar.
    """

    id: str
    name: str
    start_date: Optional[date]
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    all_day: bool = False
    venue_id: Optional[str] = None
    venue: Optional[Venue] = None
    status: EventStatus = EventStatus.CONFIRMED
    description: str = ""
    location: Optional[str] = None
    full_address: Optional[str] = None
    notes: str = ""
    created_by: Optional[str] = None
    participants: List[Participant] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.all_day:
            self.start_time = None
            self.end_time = None

    @property
    def end_or_start(self) -> Optional[date]:
        return self.end_date or self.start_date

    @property
    def is_multi_day(self) -> bool:
        return bool(self.end_date and self.start_date and self.end_date != self.start_date)

    @property
    def is_time_scoped(self) -> bool:
        return not self.all_day and self.start_time is not None and self.end_time is not None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Event":
        venue_payload = record.get("espaco")
        participants = parse_records(record.get("participantes") or [], Participant.from_record, "participants")
        return cls(
            id=str(record["id"]),
            name=str(record.get("nome") or ""),
            start_date=_record_date(record, "data_evento"),
            end_date=_record_date(record, "data_fim"),
            start_time=_record_time(record, "hora_inicio"),
            end_time=_record_time(record, "hora_fim"),
            all_day=bool(record.get("dia_inteiro")),
            venue_id=record.get("espaco_id"),
            venue=Venue.from_record(venue_payload) if venue_payload else None,
            status=EventStatus(record.get("status") or EventStatus.CONFIRMED),
            description=record.get("descricao") or "",
            location=record.get("local"),
            full_address=record.get("endereco_completo"),
            notes=record.get("observacoes") or "",
            created_by=record.get("criado_por"),
            participants=participants,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "nome": self.name,
            "descricao": self.description,
            "data_evento": _iso(self.start_date),
            "data_fim": _iso(self.end_date),
            "multiplos_dias": self.is_multi_day,
            "hora_inicio": _hhmm(self.start_time),
            "hora_fim": _hhmm(self.end_time),
            "dia_inteiro": self.all_day,
            "local": self.location,
            "endereco_completo": self.full_address,
            "espaco_id": self.venue_id,
            "status": self.status.value,
            "observacoes": self.notes,
            "criado_por": self.created_by,
        }


@dataclass(slots=True)
class Reservation:
    """A single-date, time-scoped booking of a venue."""

    id: str
    venue_id: str
    reservation_date: Optional[date]
    start_time: Optional[time]
    end_time: Optional[time]
    responsible_name: str
    responsible_email: Optional[str] = None
    responsible_phone: Optional[str] = None
    status: ReservationStatus = ReservationStatus.CONFIRMED
    fee: Optional[float] = None
    event_id: Optional[str] = None
    notes: str = ""
    created_by: Optional[str] = None
    venue: Optional[Venue] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Reservation":
        venue_payload = record.get("espaco")
        fee = record.get("valor_locacao")
        return cls(
            id=str(record["id"]),
            venue_id=str(record.get("espaco_id") or ""),
            reservation_date=_record_date(record, "data_reserva"),
            start_time=_record_time(record, "hora_inicio"),
            end_time=_record_time(record, "hora_fim"),
            responsible_name=str(record.get("responsavel_nome") or ""),
            responsible_email=record.get("responsavel_email"),
            responsible_phone=record.get("responsavel_telefone"),
            status=ReservationStatus(record.get("status") or ReservationStatus.CONFIRMED),
            fee=float(fee) if fee not in (None, "") else None,
            event_id=record.get("evento_id"),
            notes=record.get("observacoes") or "",
            created_by=record.get("criado_por"),
            venue=Venue.from_record(venue_payload) if venue_payload else None,
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "espaco_id": self.venue_id,
            "evento_id": self.event_id,
            "data_reserva": _iso(self.reservation_date),
            "hora_inicio": _hhmm(self.start_time),
            "hora_fim": _hhmm(self.end_time),
            "responsavel_nome": self.responsible_name,
            "responsavel_email": self.responsible_email,
            "responsavel_telefone": self.responsible_phone,
            "status": self.status.value,
            "valor_locacao": self.fee,
            "observacoes": self.notes,
            "criado_por": self.created_by,
        }


@dataclass(slots=True)
class Holiday:
    id: str
    holiday_date: Optional[date]
    name: str
    kind: HolidayType = HolidayType.NATIONAL
    recurring: bool = False
    month: Optional[int] = None
    day: Optional[int] = None

    def matches(self, target: date) -> bool:
        """Exact date match, or month/day match in any year when recurring."""

        if self.holiday_date == target:
            return True
        if not self.recurring:
            return False
        month = self.month or (self.holiday_date.month if self.holiday_date else None)
        day = self.day or (self.holiday_date.day if self.holiday_date else None)
        return month == target.month and day == target.day

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Holiday":
        return cls(
            id=str(record["id"]),
            holiday_date=_record_date(record, "data"),
            name=str(record.get("nome") or ""),
            kind=HolidayType(record.get("tipo") or HolidayType.NATIONAL),
            recurring=bool(record.get("recorrente")),
            month=record.get("mes"),
            day=record.get("dia"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "data": _iso(self.holiday_date),
            "nome": self.name,
            "tipo": self.kind.value,
            "recorrente": self.recurring,
            "mes": self.month,
            "dia": self.day,
        }
