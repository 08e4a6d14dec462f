"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Take the current time from an injected clock
- Treat malformed or unknown ids as absence, never as errors
- Let store failures propagate as StoreFailureError
"""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

from eventboard.domain import (
    Event,
    EventDetail,
    EventId,
    EventsByDate,
    Participant,
    classify_events,
)
from eventboard.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventService:
    """Service for event management operations."""

    def __init__(self, store: EventStore, clock: Clock = utc_now) -> None:
        self._store = store
        self._clock = clock

    def get_events_by_date(self) -> EventsByDate:
        """Return all events split into past and future at the current time."""
        return classify_events(self._store.list_events(), self._clock())

    def get_event_details(self, event_id: str) -> EventDetail | None:
        """Return an event with its participants, or None if it doesn't exist.

        A malformed ``event_id`` is treated the same as an unknown one.
        """
        parsed = EventId.parse(event_id)
        if parsed is None:
            logger.debug("Malformed event id: %r", event_id)
            return None

        event = self._store.find_event(parsed)
        if event is None:
            logger.debug("Event not found: %s", parsed)
            return None

        participants = self._store.list_participants(parsed)
        return EventDetail(
            event=event,
            participants=tuple(participants),
            new_participant=Participant.blank_for(parsed),
        )

    def create_event(self, event: Event) -> Event:
        """Persist a new event, generating an id if it has none.

        Raises:
            StoreFailureError: If the store fails to commit.
        """
        if event.id is None:
            event = replace(event, id=EventId.generate())
        self._store.add_event(event)
        self._store.commit()
        logger.info("Created event %s (%s)", event.id, event.name)
        return event

    def delete_event(self, event_id: EventId | UUID | str) -> bool:
        """Delete an event by id. Returns False if there is nothing to delete.

        Raises:
            StoreFailureError: If the store fails to commit.
        """
        if isinstance(event_id, UUID):
            event_id = EventId(value=event_id)
        elif not isinstance(event_id, EventId):
            event_id = EventId.parse(event_id)
            if event_id is None:
                return False

        event = self._store.find_event(event_id)
        if event is None:
            logger.debug("Nothing to delete for event %s", event_id)
            return False

        self._store.remove_event(event)
        self._store.commit()
        logger.info("Deleted event %s", event_id)
        return True
