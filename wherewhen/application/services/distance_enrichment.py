"""Attach the caller's distance to events shown in detail views."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.value_objects import Location
from wherewhen.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from wherewhen.application.interfaces.services import ILocationProvider

logger = get_logger(__name__)


class DistanceEnrichmentService:
    """
    Computes the distance between an event and the caller.

    Enrichment never fails: a missing provider, a provider error or a missing
    coordinate on either side leaves ``distance`` unset.
    """

    def __init__(self, location_provider: "ILocationProvider | None" = None) -> None:
        self.location_provider = location_provider

    async def enrich(
        self, event: EventEntity, origin: Location | None = None
    ) -> EventEntity:
        if origin is None:
            origin = await self._current_location()
        if origin is None:
            return event
        return self.enrich_with(event, origin)

    @staticmethod
    def enrich_with(event: EventEntity, origin: Location) -> EventEntity:
        distance = event.location.distance_to(origin)
        if distance is None:
            return event
        return event.with_distance(distance)

    async def _current_location(self) -> Location | None:
        if not self.location_provider:
            return None
        try:
            return await self.location_provider.current_location()
        except Exception as e:
            logger.debug("Current location unavailable, skipping distance: %s", e)
            return None
