from eventboard.domain.classifier import classify_events
from eventboard.domain.errors import DomainError, ErrorCode, StoreFailureError
from eventboard.domain.models import Event, EventDetail, EventsByDate, Participant
from eventboard.domain.value_objects import EventId, ParticipantId

__all__ = [
    "Event",
    "Participant",
    "EventsByDate",
    "EventDetail",
    "EventId",
    "ParticipantId",
    "DomainError",
    "ErrorCode",
    "StoreFailureError",
    "classify_events",
]
