"""
In-memory user event store.

Reference implementation of IUserEventStore used by tests, local runs and
as the contract example for document-store adapters. It keeps events and the
attendance relation in dictionaries and pushes organizer snapshots to
``observe_by_organizer`` subscribers after every change.
"""

from __future__ import annotations

import asyncio
from collections import defaultdict
from collections.abc import AsyncIterator
from datetime import datetime

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import AttendanceStatus
from wherewhen.domain.value_objects import Location
from wherewhen.infrastructure.exceptions import EventStoreError
from wherewhen.shared.telemetry.logging import get_logger
from wherewhen.shared.utils import utc_now

logger = get_logger(__name__)


class InMemoryUserEventStore:
    """Dictionary-backed IUserEventStore"""

    def __init__(self) -> None:
        self._events: dict[str, EventEntity] = {}
        # event_id -> {user_id: (status, joined_at)}, insertion ordered
        self._attendance: dict[str, dict[str, tuple[AttendanceStatus, datetime]]] = {}
        self._subscribers: dict[str, set[asyncio.Queue[list[EventEntity]]]] = defaultdict(set)

    async def get_by_id(self, event_id: str) -> EventEntity | None:
        return self._events.get(event_id)

    async def create(self, event: EventEntity) -> EventEntity:
        if event.id in self._events:
            raise EventStoreError("create", event.id, "event already exists")
        stored = event.with_distance(None)
        self._events[stored.id] = stored
        self._attendance.setdefault(stored.id, {})
        self._publish(stored.organizer_id)
        return stored

    async def update(self, event: EventEntity) -> EventEntity:
        previous = self._events.get(event.id)
        if previous is None:
            raise EventStoreError("update", event.id, "event does not exist")
        stored = event.with_distance(None)
        self._events[stored.id] = stored
        self._publish(stored.organizer_id)
        if previous.organizer_id != stored.organizer_id:
            self._publish(previous.organizer_id)
        return stored

    async def delete(self, event_id: str) -> None:
        removed = self._events.pop(event_id, None)
        attendees = self._attendance.pop(event_id, {})
        if removed is not None:
            logger.debug(
                "Deleted event %s and %d attendance records", event_id, len(attendees)
            )
            self._publish(removed.organizer_id)

    async def search_by_location(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
        organizer_id: str | None = None,
    ) -> list[EventEntity]:
        results = []
        for event in self._events.values():
            if not event.is_user_created():
                continue
            if organizer_id is not None and event.organizer_id != organizer_id:
                continue
            if not event.location.has_coordinates():
                continue
            if event.is_nearby(Location(latitude=latitude, longitude=longitude), radius_km):
                results.append(event)
        return sorted(results, key=lambda event: event.date_time)

    async def join(self, event_id: str, user_id: str) -> None:
        if event_id not in self._events:
            raise EventStoreError("join", event_id, "event does not exist")
        attendance = self._attendance.setdefault(event_id, {})
        if user_id not in attendance:
            attendance[user_id] = (AttendanceStatus.GOING, utc_now())

    async def leave(self, event_id: str, user_id: str) -> None:
        self._attendance.get(event_id, {}).pop(user_id, None)

    async def get_attendees(self, event_id: str) -> list[str]:
        return [
            user_id
            for user_id, (status, _) in self._attendance.get(event_id, {}).items()
            if status == AttendanceStatus.GOING
        ]

    async def get_created_by(self, user_id: str) -> list[EventEntity]:
        return self._snapshot(user_id)

    async def get_joined_by(self, user_id: str) -> list[EventEntity]:
        joined = [
            self._events[event_id]
            for event_id, attendance in self._attendance.items()
            if user_id in attendance and event_id in self._events
        ]
        return sorted(joined, key=lambda event: event.date_time)

    async def observe_by_organizer(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        """
        Yield the organizer's events now and after every change.

        Only the latest snapshot is kept for a slow consumer. The subscription
        is released when the generator is closed or its task is cancelled.
        """
        queue: asyncio.Queue[list[EventEntity]] = asyncio.Queue(maxsize=1)
        self._subscribers[organizer_id].add(queue)
        logger.debug("Subscriber added for organizer %s", organizer_id)
        try:
            yield self._snapshot(organizer_id)
            while True:
                yield await queue.get()
        finally:
            subscribers = self._subscribers.get(organizer_id)
            if subscribers is not None:
                subscribers.discard(queue)
                if not subscribers:
                    del self._subscribers[organizer_id]
            logger.debug("Subscriber removed for organizer %s", organizer_id)

    def subscriber_count(self, organizer_id: str) -> int:
        return len(self._subscribers.get(organizer_id, ()))

    def _snapshot(self, organizer_id: str) -> list[EventEntity]:
        events = [
            event
            for event in self._events.values()
            if event.is_user_created() and event.organizer_id == organizer_id
        ]
        return sorted(events, key=lambda event: event.date_time)

    def _publish(self, organizer_id: str | None) -> None:
        if organizer_id is None or organizer_id not in self._subscribers:
            return
        snapshot = self._snapshot(organizer_id)
        for queue in self._subscribers[organizer_id]:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(snapshot)
