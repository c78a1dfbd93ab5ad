"""
Composite event repository.

Presents the read-only external catalog and the mutable user event store as
one logical event catalog. Searches fan out to both sources concurrently and
merge the results; everything that mutates or depends on ownership is routed
to the user store only.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable, Iterable
from typing import TYPE_CHECKING

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory
from wherewhen.domain.value_objects import Location
from wherewhen.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import ICatalogSource, IUserEventStore

logger = get_logger(__name__)

EventFilter = Callable[[EventEntity], bool]
Fetch = Callable[[], Awaitable[list[EventEntity]]]


def merge_events(*sources: Iterable[EventEntity]) -> list[EventEntity]:
    """
    Concatenate sources in order, keep the first event seen per id and sort
    ascending by start time.

    The sort is stable, so events starting at the same time keep their
    source order regardless of which source answered first.
    """
    seen: set[str] = set()
    merged: list[EventEntity] = []
    for events in sources:
        for event in events:
            if event.id in seen:
                continue
            seen.add(event.id)
            merged.append(event)
    return sorted(merged, key=lambda event: event.date_time)


class CompositeEventRepository:
    """
    IEventRepository over ICatalogSource + IUserEventStore.

    Partial-result policy: when one source fails during a search its
    contribution is replaced by an empty list and the failure is logged.
    This is the one place in the engine where an error is absorbed.
    """

    def __init__(self, catalog: "ICatalogSource", user_store: "IUserEventStore") -> None:
        self.catalog = catalog
        self.user_store = user_store

    async def _fetch_or_empty(self, source: str, fetch: Fetch) -> list[EventEntity]:
        try:
            return await fetch()
        except Exception as e:
            logger.warning(
                "Event source '%s' failed, continuing with partial results: %s", source, e
            )
            return []

    async def _merge(
        self,
        catalog_fetch: Fetch,
        user_fetch: Fetch,
        predicate: EventFilter | None = None,
    ) -> list[EventEntity]:
        catalog_events, user_events = await asyncio.gather(
            self._fetch_or_empty("catalog", catalog_fetch),
            self._fetch_or_empty("user_store", user_fetch),
        )
        if predicate is not None:
            catalog_events = [event for event in catalog_events if predicate(event)]
            user_events = [event for event in user_events if predicate(event)]

        merged = merge_events(catalog_events, user_events)
        logger.debug(
            "Merged %d catalog + %d user events into %d",
            len(catalog_events),
            len(user_events),
            len(merged),
        )
        return merged

    def _user_events_near(self, location: Location, radius_km: float) -> Fetch:
        return lambda: self.user_store.search_by_location(
            location.latitude, location.longitude, radius_km  # type: ignore[arg-type]
        )

    async def search_nearby(self, location: Location, radius_km: float) -> list[EventEntity]:
        return await self._merge(
            lambda: self.catalog.search_nearby(location.latitude, location.longitude, radius_km),  # type: ignore[arg-type]
            self._user_events_near(location, radius_km),
        )

    async def search_by_category(
        self, location: Location, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        return await self._merge(
            lambda: self.catalog.search_by_category(
                location.latitude, location.longitude, category, radius_km  # type: ignore[arg-type]
            ),
            self._user_events_near(location, radius_km),
            predicate=lambda event: event.category == category,
        )

    async def search_by_name(
        self, location: Location, query: str, radius_km: float
    ) -> list[EventEntity]:
        needle = query.casefold()
        return await self._merge(
            lambda: self.catalog.search_nearby(location.latitude, location.longitude, radius_km),  # type: ignore[arg-type]
            self._user_events_near(location, radius_km),
            predicate=lambda event: needle in event.title.casefold(),
        )

    # Ownership and mutation: user store only, never the catalog

    async def get_by_id(self, event_id: str) -> EventEntity | None:
        return await self.user_store.get_by_id(event_id)

    async def create_user_event(self, event: EventEntity) -> EventEntity:
        return await self.user_store.create(event)

    async def update_user_event(self, event: EventEntity) -> EventEntity:
        return await self.user_store.update(event)

    async def delete_user_event(self, event_id: str) -> None:
        await self.user_store.delete(event_id)

    async def join_event(self, event_id: str, user_id: str) -> None:
        await self.user_store.join(event_id, user_id)

    async def leave_event(self, event_id: str, user_id: str) -> None:
        await self.user_store.leave(event_id, user_id)

    async def get_attendees(self, event_id: str) -> list[str]:
        return await self.user_store.get_attendees(event_id)

    async def get_user_created_events(self, user_id: str) -> list[EventEntity]:
        return await self.user_store.get_created_by(user_id)

    async def get_user_joined_events(self, user_id: str) -> list[EventEntity]:
        return await self.user_store.get_joined_by(user_id)

    def observe_user_events(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        return self.user_store.observe_by_organizer(organizer_id)
