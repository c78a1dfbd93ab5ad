"""
Infrastructure exceptions for the WhereWhen event engine.

This module defines infrastructure-level exceptions raised by the external
event catalog client and the user event store adapters.
"""

from wherewhen.domain.exceptions import WhereWhenException


class CatalogSourceError(WhereWhenException):
    """External event catalog request or response failed."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Event catalog {operation} failed",
            "CATALOG_SOURCE_ERROR",
            {"operation": operation, "reason": reason},
        )


class CatalogNotConfiguredError(WhereWhenException):
    """Catalog backend selected without the configuration it needs."""

    def __init__(self, backend: str, setting: str):
        super().__init__(
            f"{setting.upper()} required for {backend} catalog backend",
            "CATALOG_NOT_CONFIGURED",
            {"backend": backend, "setting": setting},
        )


class EventStoreError(WhereWhenException):
    """User event store operation failed."""

    def __init__(self, operation: str, event_id: str | None = None, reason: str | None = None):
        details = {"operation": operation}
        if event_id:
            details["event_id"] = event_id
        if reason:
            details["reason"] = reason
        super().__init__(f"Event store {operation} failed", "EVENT_STORE_ERROR", details)
