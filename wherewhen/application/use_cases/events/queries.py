"""Read-side use cases: event details and per-user event lists."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from wherewhen.application.services.distance_enrichment import DistanceEnrichmentService
from wherewhen.application.use_cases.events.base import EventUseCase, translate_errors
from wherewhen.domain.entities import EventEntity
from wherewhen.domain.value_objects import Location

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository


class EventQueryService(EventUseCase):
    """Event detail and user event lists"""

    def __init__(
        self,
        event_repo: "IEventRepository",
        enrichment: DistanceEnrichmentService | None = None,
    ) -> None:
        super().__init__(event_repo)
        self.enrichment = enrichment or DistanceEnrichmentService()

    async def get_event(self, event_id: str, origin: Location | None = None) -> EventEntity:
        """
        Event details with the caller's distance attached when it can be computed.

        Raises:
            EventNotFoundException: If the event does not exist
        """
        event = await self._load_event(event_id)
        return await self.enrichment.enrich(event, origin)

    async def get_user_created_events(self, user_id: str) -> list[EventEntity]:
        with translate_errors("get_user_created_events"):
            return await self.event_repo.get_user_created_events(user_id)

    async def get_user_joined_events(self, user_id: str) -> list[EventEntity]:
        with translate_errors("get_user_joined_events"):
            return await self.event_repo.get_user_joined_events(user_id)

    def observe_user_events(self, organizer_id: str) -> AsyncIterator[list[EventEntity]]:
        """
        Live snapshots of an organizer's events.

        Close the iterator (``aclose()`` or ``contextlib.aclosing``) or cancel
        the consuming task to release the subscription.
        """
        return self.event_repo.observe_user_events(organizer_id)
