"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    occurrence_time = models.DateTimeField()
    place = models.CharField(max_length=255)
    info = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["occurrence_time"]
        indexes = [
            models.Index(fields=["occurrence_time"], name="event_occurrence_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Participant(models.Model):
    """Persistence model for participants registered to an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="participants"
    )
    name = models.CharField(max_length=255)
    contact = models.CharField(max_length=255, blank=True, default="")
    info = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event", "created_at"], name="participant_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.event.name}"
