"""
Shared plumbing for the event use cases: loading events and translating
lower-layer failures into the event error taxonomy.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from wherewhen.domain.entities import EventEntity
from wherewhen.domain.exceptions import (
    EventException,
    EventNotFoundException,
    EventOperationError,
    InvalidEventException,
    UnauthorizedEventAccessException,
)
from wherewhen.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository
    from wherewhen.application.interfaces.services import IIdentityProvider

logger = get_logger(__name__)


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    """
    Let taxonomy errors through and wrap anything else in EventOperationError.

    Raw I/O errors from stores or the catalog never cross the use-case
    boundary; the original error stays reachable as ``__cause__``.
    """
    try:
        yield
    except (EventException, EventOperationError):
        raise
    except Exception as e:
        logger.exception("Event operation '%s' failed", operation)
        raise EventOperationError(operation, e) from e


class EventUseCase:
    """Base for services that orchestrate validation and repository calls"""

    def __init__(
        self,
        event_repo: "IEventRepository",
        identity_provider: "IIdentityProvider | None" = None,
    ) -> None:
        self.event_repo = event_repo
        self.identity_provider = identity_provider

    async def _load_event(self, event_id: str) -> EventEntity:
        """Fetch an event; any lookup failure reads as 'not found'"""
        try:
            event = await self.event_repo.get_by_id(event_id)
        except EventException:
            raise
        except Exception as e:
            logger.warning("Lookup of event %s failed: %s", event_id, e)
            raise EventNotFoundException(event_id) from e

        if event is None:
            raise EventNotFoundException(event_id)
        return event

    async def _load_attendees(self, event_id: str) -> list[str]:
        try:
            return await self.event_repo.get_attendees(event_id)
        except EventException:
            raise
        except Exception as e:
            logger.warning("Attendee lookup for event %s failed: %s", event_id, e)
            raise EventNotFoundException(event_id) from e

    def _resolve_caller(self, user_id: str | None, event_id: str, action: str) -> str:
        """Explicit user id first, then the identity provider"""
        if user_id:
            return user_id
        if self.identity_provider:
            current = self.identity_provider.current_user_id()
            if current:
                return current
        raise UnauthorizedEventAccessException(event_id, action)

    @staticmethod
    def _require_user_created(event: EventEntity, action: str) -> None:
        if not event.is_user_created():
            raise InvalidEventException(
                f"Cannot {action}: only user-created events support this operation",
                field="source",
            )

    @staticmethod
    def _require_organizer(event: EventEntity, caller_id: str, action: str) -> None:
        if event.organizer_id != caller_id:
            raise UnauthorizedEventAccessException(event.id, action, caller_id)
