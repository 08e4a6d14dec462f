"""Past/future classification of events around a reference time."""

from collections.abc import Iterable
from datetime import datetime

from eventboard.domain.models import Event, EventsByDate, to_utc


def _id_key(event: Event) -> str:
    return str(event.id) if event.id is not None else ""


def classify_events(events: Iterable[Event] | None, now: datetime) -> EventsByDate:
    """Split events into past and future relative to ``now``.

    An event happening exactly at ``now`` counts as future. Future events
    are ordered soonest first, past events most recent first; equal times
    are ordered by id.
    """
    now = to_utc(now)
    past: list[Event] = []
    future: list[Event] = []
    for event in events or ():
        if event.occurrence_time < now:
            past.append(event)
        else:
            future.append(event)

    future.sort(key=lambda e: (e.occurrence_time, _id_key(e)))
    # Two passes keep ids ascending within a shared timestamp.
    past.sort(key=_id_key)
    past.sort(key=lambda e: e.occurrence_time, reverse=True)

    return EventsByDate(past_events=tuple(past), future_events=tuple(future))
