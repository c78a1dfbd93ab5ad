"""Ticketmaster Discovery API implementation of ICatalogSource"""
import math
from typing import Any

import httpx
from pydantic import ValidationError

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventCategory
from wherewhen.infrastructure.exceptions import CatalogSourceError
from wherewhen.infrastructure.external.catalog.mapper import to_domain
from wherewhen.infrastructure.external.catalog.models import TicketmasterSearchResponse
from wherewhen.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class TicketmasterCatalogSource:
    """Read-only event catalog backed by the Ticketmaster Discovery API"""

    SEARCH_PATH = "/discovery/v2/events.json"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://app.ticketmaster.com",
        timeout_seconds: float = 10.0,
        page_size: int = 50,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            api_key: Discovery API consumer key
            base_url: API root
            timeout_seconds: Per-request timeout
            page_size: Events requested per search
            client: Optional shared client (for testing/DI); owned by the caller
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._page_size = page_size
        self._client = client

    async def search_nearby(
        self, latitude: float, longitude: float, radius_km: float
    ) -> list[EventEntity]:
        return await self._search(
            "search_nearby", self._params(latitude, longitude, radius_km)
        )

    async def search_by_category(
        self, latitude: float, longitude: float, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        params = self._params(latitude, longitude, radius_km)
        params["classificationName"] = category.value
        return await self._search("search_by_category", params)

    def _params(self, latitude: float, longitude: float, radius_km: float) -> dict[str, Any]:
        return {
            "apikey": self._api_key,
            "latlong": f"{latitude},{longitude}",
            # The API only accepts whole-number radii
            "radius": max(1, math.ceil(radius_km)),
            "unit": "km",
            "size": self._page_size,
            "sort": "date,asc",
        }

    async def _search(self, operation: str, params: dict[str, Any]) -> list[EventEntity]:
        logger.debug(
            "Ticketmaster %s at %s, radius %s km", operation, params["latlong"], params["radius"]
        )
        try:
            data = await self._get(params)
            response = TicketmasterSearchResponse.model_validate(data)
        except httpx.HTTPStatusError as e:
            raise CatalogSourceError(operation, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise CatalogSourceError(operation, str(e) or e.__class__.__name__) from e
        except (ValidationError, ValueError) as e:
            raise CatalogSourceError(operation, f"invalid response: {e}") from e

        events: list[EventEntity] = []
        for item in response.events():
            try:
                event = to_domain(item)
            except Exception as e:
                logger.error(f"Error mapping Ticketmaster event {item.id}: {e}")
                continue
            if event is None:
                logger.debug("Skipping Ticketmaster event %s without start date", item.id)
                continue
            events.append(event)

        logger.info(f"Fetched {len(events)} events from Ticketmaster ({operation})")
        return events

    async def _get(self, params: dict[str, Any]) -> Any:
        url = f"{self._base_url}{self.SEARCH_PATH}"
        if self._client is not None:
            response = await self._client.get(url, params=params, timeout=self._timeout)
            response.raise_for_status()
            return response.json()

        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()


class EmptyCatalogSource:
    """Catalog that never has events; used when no external catalog is configured"""

    async def search_nearby(
        self, latitude: float, longitude: float, radius_km: float
    ) -> list[EventEntity]:
        return []

    async def search_by_category(
        self, latitude: float, longitude: float, category: EventCategory, radius_km: float
    ) -> list[EventEntity]:
        return []
