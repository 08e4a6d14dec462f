"""Django ORM implementation of the EventStore."""

import functools
import logging

from django.db import DatabaseError, transaction

from eventboard import models
from eventboard.domain import (
    Event,
    EventId,
    Participant,
    ParticipantId,
    StoreFailureError,
)
from eventboard.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _maps_database_errors(method):
    """Re-raise Django database errors from a store call as StoreFailureError."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except DatabaseError as exc:
            logger.error("Event store %s failed: %s", method.__name__, exc)
            raise StoreFailureError(str(exc)) from exc

    return wrapper


def _to_event(record: models.Event) -> Event:
    return Event(
        id=EventId(value=record.id),
        name=record.name,
        occurrence_time=record.occurrence_time,
        place=record.place,
        info=record.info,
    )


def _to_participant(record: models.Participant) -> Participant:
    return Participant(
        id=ParticipantId(value=record.id),
        event_id=EventId(value=record.event.id),
        name=record.name,
        contact=record.contact,
        info=record.info,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def __init__(self, using: str = "default") -> None:
        self._using = using
        self._pending_adds: list[Event] = []
        self._pending_removes: list[Event] = []

    def _events(self):
        return models.Event.objects.using(self._using)

    @_maps_database_errors
    def list_events(self) -> list[Event]:
        return [_to_event(record) for record in self._events().all()]

    @_maps_database_errors
    def find_event(self, event_id: EventId) -> Event | None:
        record = self._events().filter(pk=event_id.value).first()
        return _to_event(record) if record is not None else None

    def add_event(self, event: Event) -> None:
        self._pending_adds.append(event)

    def remove_event(self, event: Event) -> None:
        self._pending_removes.append(event)

    @_maps_database_errors
    def list_participants(self, event_id: EventId) -> list[Participant]:
        records = (
            models.Participant.objects.using(self._using)
            .select_related("event")
            .filter(event_id=event_id.value)
        )
        return [_to_participant(record) for record in records]

    @_maps_database_errors
    def commit(self) -> None:
        adds, removes = self._pending_adds, self._pending_removes
        self._pending_adds, self._pending_removes = [], []
        with transaction.atomic(using=self._using):
            for event in removes:
                self._events().filter(pk=event.id.value).delete()
            for event in adds:
                if event.id is None:
                    raise StoreFailureError("event has no id")
                self._events().create(
                    id=event.id.value,
                    name=event.name,
                    occurrence_time=event.occurrence_time,
                    place=event.place,
                    info=event.info,
                )
