"""
Read-through / write-through cache decorator for IEventRepository.

Invalidation rules, all in this class:
- reads (single or list) store every returned event by id, unless the id
  was invalidated while the read was in flight
- create/update store the value the wrapped repository returned
- delete removes the id after the wrapped delete succeeds
- attendance calls and observation pass through untouched
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory
from wherewhen.domain.value_objects import Location
from wherewhen.infrastructure.cache.event_cache import EventCache

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository


class CachedEventRepository:
    """Transparent IEventRepository wrapper backed by an EventCache"""

    def __init__(self, decorated: "IEventRepository", cache: EventCache | None = None) -> None:
        self.decorated = decorated
        self.cache = cache if cache is not None else EventCache()

    def _remember(self, events: list[EventEntity], since: int) -> list[EventEntity]:
        # distance belongs to the caller of one search, not to the event
        self.cache.put_all((event.with_distance(None) for event in events), since=since)
        return events

    async def search_nearby(self, location: Location, radius_km: float) -> list[EventEntity]:
        since = self.cache.token()
        return self._remember(await self.decorated.search_nearby(location, radius_km), since)

    async def search_by_category(
        self, location: Location, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        since = self.cache.token()
        return self._remember(
            await self.decorated.search_by_category(location, category, radius_km), since
        )

    async def search_by_name(
        self, location: Location, query: str, radius_km: float
    ) -> list[EventEntity]:
        since = self.cache.token()
        return self._remember(
            await self.decorated.search_by_name(location, query, radius_km), since
        )

    async def get_by_id(self, event_id: str) -> EventEntity | None:
        cached = self.cache.get(event_id)
        if cached is not None:
            return cached

        since = self.cache.token()
        event = await self.decorated.get_by_id(event_id)
        if event is not None:
            self.cache.put(event.with_distance(None), since=since)
        return event

    async def create_user_event(self, event: EventEntity) -> EventEntity:
        created = await self.decorated.create_user_event(event)
        self.cache.put(created)
        return created

    async def update_user_event(self, event: EventEntity) -> EventEntity:
        updated = await self.decorated.update_user_event(event)
        self.cache.put(updated)
        return updated

    async def delete_user_event(self, event_id: str) -> None:
        await self.decorated.delete_user_event(event_id)
        self.cache.invalidate(event_id)

    async def join_event(self, event_id: str, user_id: str) -> None:
        await self.decorated.join_event(event_id, user_id)

    async def leave_event(self, event_id: str, user_id: str) -> None:
        await self.decorated.leave_event(event_id, user_id)

    async def get_attendees(self, event_id: str) -> list[str]:
        return await self.decorated.get_attendees(event_id)

    async def get_user_created_events(self, user_id: str) -> list[EventEntity]:
        since = self.cache.token()
        return self._remember(await self.decorated.get_user_created_events(user_id), since)

    async def get_user_joined_events(self, user_id: str) -> list[EventEntity]:
        since = self.cache.token()
        return self._remember(await self.decorated.get_user_joined_events(user_id), since)

    def observe_user_events(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        return self.decorated.observe_user_events(organizer_id)
