from django.apps import AppConfig


class EventboardConfig(AppConfig):
    """Configuration for the event management application."""

    name = "eventboard"
    verbose_name = "Event Board"
