"""Request payloads for the booking forms.

Validation that belongs to the form layer lives here: required names,
``start < end`` within one day, multi-day ranges that do not run
backwards, and all-day events without times.
"""

from __future__ import annotations

from datetime import date, time
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..domain import Event, EventStatus, Reservation, ReservationStatus


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class EventInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, alias="nome")
    description: str = Field(default="", alias="descricao")
    start_date: date = Field(alias="data_evento")
    end_date: Optional[date] = Field(default=None, alias="data_fim")
    start_time: Optional[time] = Field(default=None, alias="hora_inicio")
    end_time: Optional[time] = Field(default=None, alias="hora_fim")
    all_day: bool = Field(default=False, alias="dia_inteiro")
    location: Optional[str] = Field(default=None, alias="local")
    full_address: Optional[str] = Field(default=None, alias="endereco_completo")
    venue_id: Optional[str] = Field(default=None, alias="espaco_id")
    status: EventStatus = EventStatus.CONFIRMED
    participant_ids: Optional[List[str]] = Field(default=None, alias="participantes_ids")
    notes: str = Field(default="", alias="observacoes")

    @field_validator("end_date", "start_time", "end_time", "venue_id", mode="before")
    @classmethod
    def _empty_as_missing(cls, value):
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_ranges(self) -> "EventInput":
        if self.end_date and self.end_date < self.start_date:
            raise ValueError("end date must not be before start date")
        if self.all_day:
            self.start_time = None
            self.end_time = None
            return self
        if self.start_time is None or self.end_time is None:
            raise ValueError("start and end time are required unless the event is all-day")
        if self.start_time >= self.end_time:
            raise ValueError("start time must be before end time")
        return self

    def to_domain(self, event_id: str = "") -> Event:
        return Event(
            id=event_id,
            name=self.name,
            description=self.description,
            start_date=self.start_date,
            end_date=self.end_date,
            start_time=self.start_time,
            end_time=self.end_time,
            all_day=self.all_day,
            location=self.location,
            full_address=self.full_address,
            venue_id=self.venue_id,
            status=self.status,
            notes=self.notes,
        )


class ReservationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    venue_id: str = Field(min_length=1, alias="espaco_id")
    reservation_date: date = Field(alias="data_reserva")
    start_time: time = Field(alias="hora_inicio")
    end_time: time = Field(alias="hora_fim")
    responsible_name: str = Field(min_length=1, alias="responsavel_nome")
    responsible_email: Optional[str] = Field(default=None, alias="responsavel_email")
    responsible_phone: Optional[str] = Field(default=None, alias="responsavel_telefone")
    fee: Optional[float] = Field(default=None, ge=0, alias="valor_locacao")
    event_id: Optional[str] = Field(default=None, alias="evento_id")
    notes: str = Field(default="", alias="observacoes")

    @field_validator("responsible_email", "responsible_phone", "fee", "event_id", mode="before")
    @classmethod
    def _empty_as_missing(cls, value):
        return _blank_to_none(value)

    @model_validator(mode="after")
    def _check_times(self) -> "ReservationInput":
        if self.start_time >= self.end_time:
            raise ValueError("start time must be before end time")
        return self

    def to_domain(self) -> Reservation:
        return Reservation(
            id="",
            venue_id=self.venue_id,
            reservation_date=self.reservation_date,
            start_time=self.start_time,
            end_time=self.end_time,
            responsible_name=self.responsible_name,
            responsible_email=self.responsible_email,
            responsible_phone=self.responsible_phone,
            status=ReservationStatus.CONFIRMED,
            fee=self.fee,
            event_id=self.event_id,
            notes=self.notes,
        )
