from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .domain import ConflictDiagnostic


class AgendaError(RuntimeError):
    """Base class for calendar and booking failures."""


class DataFetchError(AgendaError):
    """Raised when the persistence layer cannot return a record set."""

    def __init__(self, resource: str, message: str = "") -> None:
        self.resource = resource
        super().__init__(message or f"Could not load {resource}.")


class AvailabilityCheckError(DataFetchError):
    """Raised when a conflict lookup fails; availability is unknown, not free."""

    user_message = "Could not verify availability."

    def __init__(self, resource: str, message: str = "") -> None:
        super().__init__(resource, message or f"{self.user_message} Lookup of {resource} failed.")


class SchedulingConflictError(AgendaError):
    """Raised when a save is refused because the slot is already taken."""

    def __init__(self, diagnostic: "ConflictDiagnostic") -> None:
        self.diagnostic = diagnostic
        names = ", ".join(entry.name for entry in diagnostic.conflicts)
        super().__init__(f"Conflict detected: {names}" if names else diagnostic.message)


__all__ = [
    "AgendaError",
    "AvailabilityCheckError",
    "DataFetchError",
    "SchedulingConflictError",
]
