"""
Application layer - Application Business Rules.

This layer contains application-specific business rules, including:
- Interfaces (ports) for infrastructure dependencies
- Use cases that orchestrate domain logic
- Application services
"""

from wherewhen.application.interfaces import (
    ICatalogSource,
    IEventRepository,
    IIdentityProvider,
    ILocationProvider,
    IUserEventStore,
)
from wherewhen.application.schemas import EventCreate, EventUpdate
from wherewhen.application.services import DistanceEnrichmentService, EventValidator
from wherewhen.application.use_cases import (
    AttendanceService,
    EventLifecycleService,
    EventQueryService,
    EventSearchService,
)

__all__ = [
    # Interfaces
    "ICatalogSource",
    "IUserEventStore",
    "IEventRepository",
    "ILocationProvider",
    "IIdentityProvider",
    # Schemas
    "EventCreate",
    "EventUpdate",
    # Services
    "EventValidator",
    "DistanceEnrichmentService",
    # Use Cases
    "EventLifecycleService",
    "AttendanceService",
    "EventSearchService",
    "EventQueryService",
]
