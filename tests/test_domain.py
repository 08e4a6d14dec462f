"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from eventboard.domain import (
    ErrorCode,
    Event,
    EventId,
    Participant,
    StoreFailureError,
)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        raw = "5b3c6a1e-8f2d-4c55-9a0e-2f1d3b4c5d6e"
        event_id = EventId.from_string(raw)
        assert event_id.value == UUID(raw)
        assert str(event_id) == raw

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")

    @pytest.mark.parametrize("raw", ["not-a-uuid", "", None, "1234"])
    def test_parse_returns_none_for_bad_input(self, raw):
        """EventId.parse returns None instead of raising."""
        assert EventId.parse(raw) is None

    def test_parse_strips_whitespace(self):
        """EventId.parse ignores surrounding whitespace."""
        event_id = EventId.generate()
        assert EventId.parse(f" \t{event_id} ") == event_id

    @pytest.mark.parametrize("raw", [42, UUID(int=1)])
    def test_parse_rejects_non_string(self, raw):
        """EventId.parse raises TypeError for non-string input."""
        with pytest.raises(TypeError):
            EventId.parse(raw)

    def test_parse_round_trips_generated_id(self):
        """A generated id parses back to an equal id."""
        event_id = EventId.generate()
        assert EventId.parse(str(event_id)) == event_id

    def test_generate_returns_distinct_ids(self):
        """Generated ids do not repeat."""
        assert EventId.generate() != EventId.generate()


class TestEvent:
    """Tests for Event domain model."""

    def test_naive_occurrence_time_is_taken_as_utc(self):
        """A naive datetime is interpreted as UTC."""
        event = Event(id=None, name="Naive", occurrence_time=datetime(2024, 1, 1, 9), place="Tallinn")
        assert event.occurrence_time == datetime(2024, 1, 1, 9, tzinfo=timezone.utc)

    def test_aware_occurrence_time_is_converted_to_utc(self):
        """An aware datetime is converted to UTC."""
        plus_three = timezone(timedelta(hours=3))
        event = Event(
            id=None,
            name="Aware",
            occurrence_time=datetime(2024, 1, 1, 12, tzinfo=plus_three),
            place="Tartu",
        )
        assert event.occurrence_time.tzinfo == timezone.utc
        assert event.occurrence_time.hour == 9

    def test_info_defaults_to_empty(self):
        """Event info is optional."""
        event = Event(id=None, name="X", occurrence_time=datetime(2024, 1, 1), place="Y")
        assert event.info == ""


class TestParticipant:
    """Tests for Participant domain model."""

    def test_blank_for_prefills_event_id_only(self):
        """The blank template carries the event id and nothing else."""
        event_id = EventId.generate()
        participant = Participant.blank_for(event_id)
        assert participant.event_id == event_id
        assert participant.id is None
        assert participant.name == ""
        assert participant.contact == ""
        assert participant.info == ""


class TestErrors:
    """Tests for domain errors."""

    def test_store_failure_has_code_and_safe_message(self):
        """StoreFailureError exposes its code and keeps the reason separate."""
        error = StoreFailureError("disk full")
        assert error.code is ErrorCode.STORE_FAILURE
        assert str(error) == "STORE_FAILURE: Could not persist changes"
        assert error.reason == "disk full"
