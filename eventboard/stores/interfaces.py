"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Writes are staged by
``add_event``/``remove_event`` and only applied by ``commit``.
"""

from abc import ABC, abstractmethod

from eventboard.domain import Event, EventId, Participant


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all persisted events, in no particular order."""
        ...

    @abstractmethod
    def find_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Stage an event for insertion."""
        ...

    @abstractmethod
    def remove_event(self, event: Event) -> None:
        """Stage an event for removal, along with its participants."""
        ...

    @abstractmethod
    def list_participants(self, event_id: EventId) -> list[Participant]:
        """Return all participants registered for an event."""
        ...

    @abstractmethod
    def commit(self) -> None:
        """Apply staged changes atomically.

        Raises:
            StoreFailureError: If the changes could not be persisted.
        """
        ...
