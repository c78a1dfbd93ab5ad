from wherewhen.infrastructure.persistence.in_memory_event_store import InMemoryUserEventStore
from wherewhen.infrastructure.persistence.repositories import (
    CachedEventRepository,
    CompositeEventRepository,
)

__all__ = [
    "InMemoryUserEventStore",
    "CompositeEventRepository",
    "CachedEventRepository",
]
