from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarService, ServiceContext, VenueService


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: CalendarService = field(init=False)
    venues: VenueService = field(init=False)

    def __post_init__(self) -> None:
        self.calendar = CalendarService(self.context)
        self.venues = VenueService(self.context)


api_state = ApiState()
