"""Calendar grid construction and venue conflict detection."""

from .calendar_grid import GRID_DAYS, build_month, events_on, grid_dates, holiday_on, reservations_on
from .conflicts import ConflictLookup, check_conflicts, evaluate_conflicts

__all__ = [
    "GRID_DAYS",
    "ConflictLookup",
    "build_month",
    "check_conflicts",
    "evaluate_conflicts",
    "events_on",
    "grid_dates",
    "holiday_on",
    "reservations_on",
]
