from __future__ import annotations

from enum import Enum


class EventStatus(str, Enum):
    CONFIRMED = "confirmado"
    PENDING = "pendente"
    CANCELLED = "cancelado"


class ReservationStatus(str, Enum):
    CONFIRMED = "confirmada"
    PENDING = "pendente"
    CANCELLED = "cancelada"


class HolidayType(str, Enum):
    NATIONAL = "nacional"
    STATE = "estadual"
    MUNICIPAL = "municipal"
    RELIGIOUS = "religioso"


class AttendanceStatus(str, Enum):
    CONFIRMED = "confirmado"
    PENDING = "pendente"
    DECLINED = "recusado"


class ConflictKind(str, Enum):
    VENUE = "venue"
    TIME = "time"
    NONE = "none"
