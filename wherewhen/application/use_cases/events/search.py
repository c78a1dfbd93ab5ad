"""Event search use cases over the merged catalog + user event view."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wherewhen.application.services.event_validation import EventValidator
from wherewhen.application.use_cases.events.base import translate_errors
from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory
from wherewhen.domain.value_objects import Location
from wherewhen.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository

logger = get_logger(__name__)

DEFAULT_RADIUS_KM = 25.0


class EventSearchService:
    """Validates search input and delegates to the repository"""

    def __init__(
        self,
        event_repo: "IEventRepository",
        validator: EventValidator | None = None,
        default_radius_km: float = DEFAULT_RADIUS_KM,
    ) -> None:
        self.event_repo = event_repo
        self.validator = validator or EventValidator()
        self.default_radius_km = default_radius_km

    def _check(self, location: Location, radius_km: float | None) -> float:
        radius = self.default_radius_km if radius_km is None else radius_km
        self.validator.validate_radius(radius)
        self.validator.validate_search_location(location)
        return radius

    async def search_nearby(
        self, location: Location, radius_km: float | None = None
    ) -> list[EventEntity]:
        """Events from both sources within the radius, soonest first"""
        radius = self._check(location, radius_km)
        with translate_errors("search_nearby"):
            events = await self.event_repo.search_nearby(location, radius)
        logger.debug("Nearby search (%.1f km) returned %d events", radius, len(events))
        return events

    async def search_by_category(
        self, location: Location, category: EventCategory, radius_km: float | None = None
    ) -> list[EventEntity]:
        radius = self._check(location, radius_km)
        with translate_errors("search_by_category"):
            return await self.event_repo.search_by_category(location, category, radius)

    async def search_by_name(
        self, location: Location, query: str, radius_km: float | None = None
    ) -> list[EventEntity]:
        """Case-insensitive title search; blank queries are rejected"""
        trimmed = self.validator.validate_query(query)
        radius = self._check(location, radius_km)
        with translate_errors("search_by_name"):
            return await self.event_repo.search_by_name(location, trimmed, radius)
