from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import ConflictKind


@dataclass(frozen=True, slots=True)
class ConflictEntry:
    """An existing confirmed event or reservation that collides with a candidate slot."""

    name: str
    date: str
    start_time: str
    end_time: str
    event_id: Optional[str] = None
    reservation_id: Optional[str] = None

    @property
    def id(self) -> Optional[str]:
        return self.event_id or self.reservation_id

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "nome": self.name,
            "data": self.date,
            "hora_inicio": self.start_time,
            "hora_fim": self.end_time,
        }
        if self.event_id:
            payload["evento_id"] = self.event_id
        if self.reservation_id:
            payload["reserva_id"] = self.reservation_id
        return payload


@dataclass(frozen=True, slots=True)
class ConflictDiagnostic:
    exists: bool
    kind: ConflictKind
    message: str
    conflicts: List[ConflictEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "existe": self.exists,
            "tipo": self.kind.value,
            "mensagem": self.message,
            "conflitos": [entry.to_dict() for entry in self.conflicts],
        }
