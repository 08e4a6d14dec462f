"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in eventboard/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from eventboard.domain.value_objects import EventId, ParticipantId


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    ``id`` is None only for events that have not been created yet.
    """

    id: EventId | None
    name: str
    occurrence_time: datetime
    place: str
    info: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "occurrence_time", to_utc(self.occurrence_time))


@dataclass(frozen=True)
class Participant:
    """Domain representation of a Participant registered for an event."""

    id: ParticipantId | None
    event_id: EventId
    name: str = ""
    contact: str = ""
    info: str = ""

    @classmethod
    def blank_for(cls, event_id: EventId) -> "Participant":
        """Empty participant template bound to an event."""
        return cls(id=None, event_id=event_id)


@dataclass(frozen=True)
class EventsByDate:
    """Events split around a point in time."""

    past_events: tuple[Event, ...] = ()
    future_events: tuple[Event, ...] = ()


@dataclass(frozen=True)
class EventDetail:
    """An event with its participants and a template for registering one more."""

    event: Event
    participants: tuple[Participant, ...]
    new_participant: Participant
