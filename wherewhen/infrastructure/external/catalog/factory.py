"""Catalog source factory for backend selection."""
from wherewhen.application.interfaces.repositories import ICatalogSource
from wherewhen.infrastructure.exceptions import CatalogNotConfiguredError
from wherewhen.infrastructure.external.catalog.ticketmaster import (
    EmptyCatalogSource,
    TicketmasterCatalogSource,
)


class CatalogSourceFactory:
    """Factory for creating catalog source instances based on configuration."""

    @staticmethod
    def create_catalog_source(settings) -> ICatalogSource:
        """
        Create catalog source based on settings.

        Args:
            settings: Application settings with catalog configuration

        Returns:
            ICatalogSource: Configured catalog source

        Raises:
            CatalogNotConfiguredError: If the Ticketmaster API key is missing
            ValueError: If unknown backend
        """
        backend = settings.catalog_backend.lower()

        if backend == "ticketmaster":
            if not settings.ticketmaster_api_key:
                raise CatalogNotConfiguredError(backend, "ticketmaster_api_key")
            return TicketmasterCatalogSource(
                api_key=settings.ticketmaster_api_key,
                base_url=settings.ticketmaster_base_url,
                timeout_seconds=settings.ticketmaster_timeout_seconds,
                page_size=settings.ticketmaster_page_size,
            )

        elif backend == "none":
            return EmptyCatalogSource()

        else:
            raise ValueError(
                f"Unknown catalog backend: {backend}. " f"Supported: 'ticketmaster', 'none'"
            )
