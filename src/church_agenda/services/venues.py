from __future__ import annotations

from dataclasses import dataclass

from ..domain import Venue
from .context import ServiceContext


@dataclass(slots=True)
class VenueService:
    context: ServiceContext

    def list_active(self) -> list[Venue]:
        return self.context.venues.list_active()
