from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from ...domain import Event, EventStatus, Participant, parse_records
from ...utils.dates import format_iso_date
from ..supabase import SupabaseGateway

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EventRepository:
    gateway: SupabaseGateway
    table_name: str
    participants_table: str

    def _select_clause(self) -> str:
        return "*, espaco:espaco_id(*)"

    def list_events(self) -> List[Event]:
        query = (
            self.gateway.table(self.table_name)
            .select(self._select_clause())
            .order("data_evento", desc=False)
        )
        return parse_records(self.gateway.run(query, "events"), Event.from_record, "events")

    def confirmed_at(self, venue_id: str, day: date, exclude_event_id: Optional[str] = None) -> List[Event]:
        query = (
            self.gateway.table(self.table_name)
            .select("id, nome, data_evento, hora_inicio, hora_fim, dia_inteiro")
            .eq("espaco_id", venue_id)
            .eq("data_evento", format_iso_date(day))
            .eq("status", EventStatus.CONFIRMED.value)
        )
        if exclude_event_id:
            query = query.neq("id", exclude_event_id)
        return [Event.from_record(record) for record in self.gateway.run(query, "events")]

    def insert(self, event: Event) -> Event:
        query = self.gateway.table(self.table_name).insert(event.to_record())
        records = self.gateway.run(query, "events")
        return Event.from_record(records[0]) if records else event

    def update(self, event: Event) -> Event:
        payload = event.to_record()
        payload.pop("id")
        payload.pop("criado_por")
        query = self.gateway.table(self.table_name).update(payload).eq("id", event.id)
        records = self.gateway.run(query, "events")
        return Event.from_record(records[0]) if records else event

    def delete(self, event_id: str) -> bool:
        query = self.gateway.table(self.table_name).delete().eq("id", event_id)
        return bool(self.gateway.run(query, "events"))

    def replace_participants(self, event_id: str, person_ids: Iterable[str]) -> List[Participant]:
        """Swap the participant list; every new participant starts as pending."""

        delete_query = self.gateway.table(self.participants_table).delete().eq("evento_id", event_id)
        self.gateway.run(delete_query, "participants")
        participants = [Participant(person_id=person_id, event_id=event_id) for person_id in person_ids]
        if not participants:
            return []
        insert_query = self.gateway.table(self.participants_table).insert(
            [participant.to_record() for participant in participants]
        )
        records = self.gateway.run(insert_query, "participants")
        logger.debug("Stored %d participant(s) for event %s", len(participants), event_id)
        return [Participant.from_record(record) for record in records] or participants
