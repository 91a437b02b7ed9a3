from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...domain import Holiday, parse_records
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class HolidayRepository:
    gateway: SupabaseGateway
    table_name: str

    def list_holidays(self) -> List[Holiday]:
        query = self.gateway.table(self.table_name).select("*").order("data")
        return parse_records(self.gateway.run(query, "holidays"), Holiday.from_record, "holidays")
