"""
Repository interfaces (ports) for the application layer.

These protocols define the contracts for the two event sources and for the
merged repository the use cases talk to. Following Dependency Inversion
Principle (DIP): the application depends on these, infrastructure implements them.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Protocol

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory
from wherewhen.domain.value_objects import Location


class ICatalogSource(Protocol):
    """Read-only external event catalog. Implementations raise on failure."""

    async def search_nearby(
        self, latitude: float, longitude: float, radius_km: float
    ) -> list[EventEntity]:
        """Catalog events within radius_km of the given point"""
        ...

    async def search_by_category(
        self, latitude: float, longitude: float, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        """Catalog events of one category within radius_km of the given point"""
        ...


class IUserEventStore(Protocol):
    """Mutable store of user-created events and their attendance relation."""

    async def get_by_id(self, event_id: str) -> EventEntity | None:
        """Get an event by id, or None if it does not exist"""
        ...

    async def create(self, event: EventEntity) -> EventEntity:
        """Persist a new event and return the stored value"""
        ...

    async def update(self, event: EventEntity) -> EventEntity:
        """Replace an existing event and return the stored value"""
        ...

    async def delete(self, event_id: str) -> None:
        """Delete an event together with its attendance records"""
        ...

    async def search_by_location(
        self,
        latitude: float,
        longitude: float,
        radius_km: float,
        organizer_id: str | None = None,
    ) -> list[EventEntity]:
        """User events within radius_km, optionally restricted to one organizer"""
        ...

    async def join(self, event_id: str, user_id: str) -> None:
        """Add (event_id, user_id) to the attendance relation"""
        ...

    async def leave(self, event_id: str, user_id: str) -> None:
        """Remove (event_id, user_id) from the attendance relation"""
        ...

    async def get_attendees(self, event_id: str) -> list[str]:
        """User ids attending an event"""
        ...

    async def get_created_by(self, user_id: str) -> list[EventEntity]:
        """Events organized by a user"""
        ...

    async def get_joined_by(self, user_id: str) -> list[EventEntity]:
        """Events a user attends"""
        ...

    def observe_by_organizer(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        """Continuous snapshots of an organizer's events until the iterator is closed"""
        ...


class IEventRepository(Protocol):
    """Single logical view over the catalog and the user event store."""

    async def search_nearby(self, location: Location, radius_km: float) -> list[EventEntity]:
        ...

    async def search_by_category(
        self, location: Location, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        ...

    async def search_by_name(
        self, location: Location, query: str, radius_km: float
    ) -> list[EventEntity]:
        ...

    async def get_by_id(self, event_id: str) -> EventEntity | None:
        ...

    async def create_user_event(self, event: EventEntity) -> EventEntity:
        ...

    async def update_user_event(self, event: EventEntity) -> EventEntity:
        ...

    async def delete_user_event(self, event_id: str) -> None:
        ...

    async def join_event(self, event_id: str, user_id: str) -> None:
        ...

    async def leave_event(self, event_id: str, user_id: str) -> None:
        ...

    async def get_attendees(self, event_id: str) -> list[str]:
        ...

    async def get_user_created_events(self, user_id: str) -> list[EventEntity]:
        ...

    async def get_user_joined_events(self, user_id: str) -> list[EventEntity]:
        ...

    def observe_user_events(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        ...
