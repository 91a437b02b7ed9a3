from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import Event, Holiday, Reservation


@dataclass(frozen=True, slots=True)
class CalendarDay:
    """One cell of the month grid."""

    date: str
    day: int
    month: int
    year: int
    is_current_month: bool
    is_today: bool
    holiday: Optional[Holiday] = None
    events: List[Event] = field(default_factory=list)
    reservations: List[Reservation] = field(default_factory=list)

    @property
    def is_holiday(self) -> bool:
        return self.holiday is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.date,
            "dia": self.day,
            "mes": self.month,
            "ano": self.year,
            "ehMes": self.is_current_month,
            "ehHoje": self.is_today,
            "ehFeriado": self.is_holiday,
            "feriado": self.holiday.to_dict() if self.holiday else None,
            "eventos": [event.to_record() for event in self.events],
            "reservas": [reservation.to_record() for reservation in self.reservations],
        }


@dataclass(frozen=True, slots=True)
class CalendarMonth:
    """A Sunday-aligned six-week grid; ``month`` is zero-based."""

    month: int
    year: int
    days: List[CalendarDay]

    def weeks(self) -> List[List[CalendarDay]]:
        return [self.days[index : index + 7] for index in range(0, len(self.days), 7)]

    def current_month_days(self) -> List[CalendarDay]:
        return [day for day in self.days if day.is_current_month]

    def to_dict(self) -> Dict[str, Any]:
        return {"mes": self.month, "ano": self.year, "dias": [day.to_dict() for day in self.days]}
