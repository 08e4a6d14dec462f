"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def parse(cls, value: str | None) -> Self | None:
        """Parse an identifier, returning None for malformed text.

        Surrounding whitespace is ignored. Non-string input raises TypeError.
        """
        if value is None:
            return None
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        value = value.strip()
        if not value:
            return None
        try:
            return cls.from_string(value)
        except ValueError:
            return None

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ParticipantId:
    """Unique identifier for a Participant."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)
