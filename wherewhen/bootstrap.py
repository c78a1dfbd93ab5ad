"""
Composition root: wires stores, catalog, cache and use cases together.

The presentation layer builds one EventServices per process and shares it;
the cache inside is the engine's only shared mutable state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wherewhen.application.services import DistanceEnrichmentService, EventValidator
from wherewhen.application.use_cases import (
    AttendanceService,
    EventLifecycleService,
    EventQueryService,
    EventSearchService,
)
from wherewhen.infrastructure.config.settings import Settings, get_settings
from wherewhen.infrastructure.external.catalog import CatalogSourceFactory
from wherewhen.infrastructure.persistence.repositories import (
    CachedEventRepository,
    CompositeEventRepository,
)
from wherewhen.shared.context import ContextIdentityProvider
from wherewhen.shared.telemetry.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from wherewhen.application.interfaces import (
        ICatalogSource,
        IIdentityProvider,
        ILocationProvider,
        IUserEventStore,
    )

logger = get_logger(__name__)


@dataclass
class EventServices:
    """Use cases sharing one cached repository"""

    repository: CachedEventRepository
    lifecycle: EventLifecycleService
    attendance: AttendanceService
    search: EventSearchService
    queries: EventQueryService


def build_event_services(
    user_store: "IUserEventStore",
    catalog: "ICatalogSource | None" = None,
    location_provider: "ILocationProvider | None" = None,
    identity_provider: "IIdentityProvider | None" = None,
    settings: Settings | None = None,
) -> EventServices:
    """
    Build the event use cases over CachedEventRepository(CompositeEventRepository).

    Args:
        user_store: Mutable store of user-created events
        catalog: External catalog; built from settings when omitted
        location_provider: Caller location for distance enrichment
        identity_provider: Caller identity; defaults to the request context
        settings: Application settings (defaults to get_settings())
    """
    settings = settings or get_settings()
    setup_logging(settings)
    catalog = catalog or CatalogSourceFactory.create_catalog_source(settings)
    identity_provider = identity_provider or ContextIdentityProvider()

    repository = CachedEventRepository(CompositeEventRepository(catalog, user_store))
    validator = EventValidator(max_search_radius_km=settings.max_search_radius_km)

    logger.info(
        "Event services ready (catalog: %s, max radius: %g km)",
        catalog.__class__.__name__,
        settings.max_search_radius_km,
    )
    return EventServices(
        repository=repository,
        lifecycle=EventLifecycleService(repository, validator, identity_provider),
        attendance=AttendanceService(repository, identity_provider),
        search=EventSearchService(
            repository, validator, default_radius_km=settings.default_search_radius_km
        ),
        queries=EventQueryService(repository, DistanceEnrichmentService(location_provider)),
    )
