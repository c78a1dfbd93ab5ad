"""External event catalog implementations."""

from wherewhen.infrastructure.external.catalog.factory import CatalogSourceFactory
from wherewhen.infrastructure.external.catalog.ticketmaster import (
    EmptyCatalogSource,
    TicketmasterCatalogSource,
)

__all__ = ["CatalogSourceFactory", "EmptyCatalogSource", "TicketmasterCatalogSource"]
