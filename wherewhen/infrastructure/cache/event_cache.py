"""In-memory event cache keyed by event id"""
from __future__ import annotations

import threading
from collections.abc import Iterable

from wherewhen.domain.entities import EventEntity
from wherewhen.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class EventCache:
    """
    Map of event id to the last known EventEntity.

    Reads are lock-free dictionary lookups and never block each other.
    Writes hold a short lock so a batch of puts or an invalidation is
    applied as a unit. Entries never expire; they are replaced by a newer
    fetch or mutation and removed on delete. Cached entities are frozen, so
    callers can share them without copying.

    Every invalidation advances a clock and stamps the id. A reader takes
    ``token()`` before fetching and passes it as ``since`` when storing the
    results, so values read before a later invalidation are dropped instead
    of bringing a deleted event back.
    """

    def __init__(self) -> None:
        self._entries: dict[str, EventEntity] = {}
        self._invalidated_at: dict[str, int] = {}
        self._clock = 0
        self._write_lock = threading.Lock()

    def token(self) -> int:
        """Invalidation clock value to pair with a fetch starting now"""
        return self._clock

    def get(self, event_id: str) -> EventEntity | None:
        event = self._entries.get(event_id)
        if event is not None:
            logger.debug(f"Cache HIT: event:{event_id}")
        else:
            logger.debug(f"Cache MISS: event:{event_id}")
        return event

    def put(self, event: EventEntity, since: int | None = None) -> bool:
        """Store one event; False when it was invalidated after ``since``"""
        with self._write_lock:
            if self._is_stale(event.id, since):
                stored = False
            else:
                self._entries[event.id] = event
                stored = True
        if stored:
            logger.debug(f"Cache SET: event:{event.id}")
        else:
            logger.debug(f"Cache SKIP (stale): event:{event.id}")
        return stored

    def put_all(self, events: Iterable[EventEntity], since: int | None = None) -> int:
        """Store every event not invalidated after ``since``; returns how many were written"""
        batch = {event.id: event for event in events}
        if not batch:
            return 0
        with self._write_lock:
            fresh = {
                event_id: event
                for event_id, event in batch.items()
                if not self._is_stale(event_id, since)
            }
            self._entries.update(fresh)
        logger.debug(f"Cache SET: {len(fresh)} of {len(batch)} events")
        return len(fresh)

    def invalidate(self, event_id: str) -> bool:
        """Remove an entry; returns True if it was present"""
        with self._write_lock:
            self._clock += 1
            self._invalidated_at[event_id] = self._clock
            removed = self._entries.pop(event_id, None) is not None
        if removed:
            logger.debug(f"Cache DELETE: event:{event_id}")
        return removed

    def clear(self) -> None:
        with self._write_lock:
            self._entries.clear()
        logger.warning("Cache CLEARED: All events dropped")

    def _is_stale(self, event_id: str, since: int | None) -> bool:
        # caller holds the write lock
        return since is not None and self._invalidated_at.get(event_id, 0) > since

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
