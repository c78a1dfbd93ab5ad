from wherewhen.infrastructure.persistence.repositories.cached_event_repo import (
    CachedEventRepository,
)
from wherewhen.infrastructure.persistence.repositories.composite_event_repo import (
    CompositeEventRepository,
    merge_events,
)

__all__ = [
    "CachedEventRepository",
    "CompositeEventRepository",
    "merge_events",
]
