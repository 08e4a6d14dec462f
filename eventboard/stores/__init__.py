from eventboard.stores.interfaces import EventStore
from eventboard.stores.memory_store import InMemoryEventStore

__all__ = ["EventStore", "InMemoryEventStore"]
