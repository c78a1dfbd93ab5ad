"""Application services."""

from wherewhen.application.services.distance_enrichment import DistanceEnrichmentService
from wherewhen.application.services.event_validation import EventValidator

__all__ = [
    "EventValidator",
    "DistanceEnrichmentService",
]
