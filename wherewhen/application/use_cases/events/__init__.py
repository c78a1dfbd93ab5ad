"""Event use cases."""

from wherewhen.application.use_cases.events.attendance import AttendanceService
from wherewhen.application.use_cases.events.lifecycle import EventLifecycleService
from wherewhen.application.use_cases.events.queries import EventQueryService
from wherewhen.application.use_cases.events.search import EventSearchService

__all__ = [
    "AttendanceService",
    "EventLifecycleService",
    "EventQueryService",
    "EventSearchService",
]
