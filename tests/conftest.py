"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from eventboard.domain import Event, EventId, Participant, ParticipantId
from eventboard.stores import InMemoryEventStore

NOW = datetime(2024, 5, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock():
    return lambda: NOW


def make_event(name: str, offset: timedelta, **kwargs) -> Event:
    return Event(
        id=kwargs.pop("id", EventId.generate()),
        name=name,
        occurrence_time=NOW + offset,
        place=kwargs.pop("place", f"Place of {name}"),
        info=kwargs.pop("info", f"Info about {name}"),
    )


@pytest.fixture
def sample_events() -> list[Event]:
    """Event 1 in two days, Event 2 ten days ago, Event 3 tomorrow."""
    return [
        make_event("Event 1", timedelta(days=2)),
        make_event("Event 2", timedelta(days=-10)),
        make_event("Event 3", timedelta(days=1)),
    ]


@pytest.fixture
def memory_store(sample_events) -> InMemoryEventStore:
    first = sample_events[0]
    participants = [
        Participant(id=ParticipantId.generate(), event_id=first.id, name="Mari Maasikas"),
        Participant(id=ParticipantId.generate(), event_id=first.id, name="Acme OÜ"),
    ]
    return InMemoryEventStore(events=sample_events, participants=participants)


@pytest.fixture
def event_factory():
    return make_event
