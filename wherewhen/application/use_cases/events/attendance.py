"""
Attendance use cases: join, leave and list attendees of user events.

Capacity is enforced check-then-act: the attendee list is read, checked and
then the join is written, without an atomic guard. Two concurrent joins at
the capacity boundary can both be admitted unless the backing store applies
a conditional write. This is accepted best-effort enforcement.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wherewhen.application.use_cases.events.base import EventUseCase, translate_errors
from wherewhen.domain.exceptions import (
    AlreadyAttendingEventException,
    EventCancelledException,
    EventFullException,
    NotAttendingEventException,
)
from wherewhen.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository
    from wherewhen.application.interfaces.services import IIdentityProvider

logger = get_logger(__name__)


class AttendanceService(EventUseCase):
    """Join/leave orchestration over IEventRepository"""

    def __init__(
        self,
        event_repo: "IEventRepository",
        identity_provider: "IIdentityProvider | None" = None,
    ) -> None:
        super().__init__(event_repo, identity_provider)

    async def join_event(self, event_id: str, user_id: str | None = None) -> None:
        """
        Add the caller to an event's attendees.

        An existing attendee is reported as already attending even when the
        event is full.

        Raises:
            EventNotFoundException: If the event does not exist
            EventCancelledException: If the event is cancelled
            AlreadyAttendingEventException: If the caller already attends
            EventFullException: If the attendee limit is reached
        """
        event = await self._load_event(event_id)
        caller = self._resolve_caller(user_id, event_id, "join")
        self._require_user_created(event, "join event")
        if not event.accepts_attendance():
            raise EventCancelledException(event_id)

        attendees = await self._load_attendees(event_id)

        if caller in attendees:
            raise AlreadyAttendingEventException(event_id, caller)
        if event.is_full(len(attendees)):
            raise EventFullException(event_id, event.max_attendees)  # type: ignore[arg-type]

        with translate_errors("join_event"):
            await self.event_repo.join_event(event_id, caller)

        logger.info("User %s joined event %s", caller, event_id)

    async def leave_event(self, event_id: str, user_id: str | None = None) -> None:
        """
        Remove the caller from an event's attendees.

        Raises:
            EventNotFoundException: If the event or its attendee list cannot be found
            EventCancelledException: If the event is cancelled
            NotAttendingEventException: If the caller does not attend
        """
        event = await self._load_event(event_id)
        caller = self._resolve_caller(user_id, event_id, "leave")
        self._require_user_created(event, "leave event")
        if not event.accepts_attendance():
            raise EventCancelledException(event_id)

        attendees = await self._load_attendees(event_id)
        if caller not in attendees:
            raise NotAttendingEventException(event_id, caller)

        with translate_errors("leave_event"):
            await self.event_repo.leave_event(event_id, caller)

        logger.info("User %s left event %s", caller, event_id)

    async def get_attendees(self, event_id: str) -> list[str]:
        """
        Return the ids of users attending an event.

        Raises:
            EventNotFoundException: If the event does not exist
        """
        await self._load_event(event_id)
        return await self._load_attendees(event_id)
