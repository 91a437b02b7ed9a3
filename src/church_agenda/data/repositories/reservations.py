from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from ...domain import Reservation, ReservationStatus, parse_records
from ...utils.dates import format_iso_date
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class ReservationRepository:
    gateway: SupabaseGateway
    table_name: str

    def list_reservations(self) -> List[Reservation]:
        query = (
            self.gateway.table(self.table_name)
            .select("*, espaco:espaco_id(*)")
            .order("data_reserva", desc=False)
        )
        return parse_records(self.gateway.run(query, "reservations"), Reservation.from_record, "reservations")

    def confirmed_at(self, venue_id: str, day: date) -> List[Reservation]:
        query = (
            self.gateway.table(self.table_name)
            .select("id, espaco_id, responsavel_nome, data_reserva, hora_inicio, hora_fim")
            .eq("espaco_id", venue_id)
            .eq("data_reserva", format_iso_date(day))
            .eq("status", ReservationStatus.CONFIRMED.value)
        )
        return [Reservation.from_record(record) for record in self.gateway.run(query, "reservations")]

    def insert(self, reservation: Reservation) -> Reservation:
        query = self.gateway.table(self.table_name).insert(reservation.to_record())
        records = self.gateway.run(query, "reservations")
        return Reservation.from_record(records[0]) if records else reservation
