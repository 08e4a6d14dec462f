from eventboard.services.event_service import Clock, EventService, utc_now


def build_event_service() -> EventService:
    """Return an EventService backed by the Django ORM store."""
    from eventboard.stores.django_store import DjangoEventStore

    return EventService(DjangoEventStore(), clock=utc_now)


__all__ = ["Clock", "EventService", "build_event_service", "utc_now"]
