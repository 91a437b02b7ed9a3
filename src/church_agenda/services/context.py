from __future__ import annotations

from dataclasses import dataclass, field

from ..config import AppSettings, get_settings
from ..data import SupabaseGateway
from ..data.repositories import (
    EventRepository,
    HolidayRepository,
    RepositoryConflictLookup,
    ReservationRepository,
    VenueRepository,
)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, gateway, and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    gateway: SupabaseGateway = field(init=False)
    events: EventRepository = field(init=False)
    reservations: ReservationRepository = field(init=False)
    holidays: HolidayRepository = field(init=False)
    venues: VenueRepository = field(init=False)

    def __post_init__(self) -> None:
        storage = self.settings.storage
        self.gateway = SupabaseGateway(self.settings.supabase)
        self.events = EventRepository(
            gateway=self.gateway,
            table_name=storage.events_table,
            participants_table=storage.participants_table,
        )
        self.reservations = ReservationRepository(gateway=self.gateway, table_name=storage.reservations_table)
        self.holidays = HolidayRepository(gateway=self.gateway, table_name=storage.holidays_table)
        self.venues = VenueRepository(gateway=self.gateway, table_name=storage.venues_table)

    @property
    def conflict_lookup(self) -> RepositoryConflictLookup:
        return RepositoryConflictLookup(events=self.events, reservations=self.reservations)
