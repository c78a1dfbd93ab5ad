"""Domain entities."""

from wherewhen.domain.entities.event import EventEntity

__all__ = [
    "EventEntity",
]
