"""Command schemas accepted by the event use cases."""

from wherewhen.application.schemas.event import EventCreate, EventUpdate

__all__ = ["EventCreate", "EventUpdate"]
