from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain import Venue, parse_records
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class VenueRepository:
    gateway: SupabaseGateway
    table_name: str

    def list_active(self) -> List[Venue]:
        query = self.gateway.table(self.table_name).select("*").eq("ativo", True).order("nome")
        return parse_records(self.gateway.run(query, "venues"), Venue.from_record, "venues")
