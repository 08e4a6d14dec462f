"""In-memory implementation of the EventStore.

Holds the same contract as the ORM store and is used to exercise services
without a database.
"""

import logging
from collections.abc import Iterable

from eventboard.domain import Event, EventId, Participant, StoreFailureError
from eventboard.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class InMemoryEventStore(EventStore):
    """Dict-backed event store with staged writes."""

    def __init__(
        self,
        events: Iterable[Event] = (),
        participants: Iterable[Participant] = (),
    ) -> None:
        self._events: dict[EventId, Event] = {}
        for event in events:
            if event.id is None or event.id in self._events:
                raise ValueError("Seed events need unique ids")
            self._events[event.id] = event
        self._participants: list[Participant] = []
        for participant in participants:
            if participant.event_id not in self._events:
                raise ValueError("Seed participant references an unknown event")
            self._participants.append(participant)
        self._pending_adds: list[Event] = []
        self._pending_removes: list[Event] = []
        self.commit_count = 0

    def list_events(self) -> list[Event]:
        return list(self._events.values())

    def find_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def add_event(self, event: Event) -> None:
        self._pending_adds.append(event)

    def remove_event(self, event: Event) -> None:
        self._pending_removes.append(event)

    def list_participants(self, event_id: EventId) -> list[Participant]:
        return [p for p in self._participants if p.event_id == event_id]

    def commit(self) -> None:
        self.commit_count += 1
        adds, removes = self._pending_adds, self._pending_removes
        self._pending_adds, self._pending_removes = [], []

        events = dict(self._events)
        for event in removes:
            events.pop(event.id, None)
        for event in adds:
            if event.id is None:
                raise StoreFailureError("event has no id")
            if event.id in events:
                logger.error("Duplicate event id on commit: %s", event.id)
                raise StoreFailureError(f"duplicate event id {event.id}")
            events[event.id] = event

        self._events = events
        self._participants = [p for p in self._participants if p.event_id in events]
