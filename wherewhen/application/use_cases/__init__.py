"""Application use cases."""

from wherewhen.application.use_cases.events import (
    AttendanceService,
    EventLifecycleService,
    EventQueryService,
    EventSearchService,
)

__all__ = [
    "AttendanceService",
    "EventLifecycleService",
    "EventQueryService",
    "EventSearchService",
]
