"""
Event lifecycle use cases.

Create, update, change status and delete user-created events. Validation
happens before any repository call; organizer-only actions are authorized
against the event's ``organizer_id``.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from wherewhen.application.services.event_validation import EventValidator
from wherewhen.application.use_cases.events.base import EventUseCase, translate_errors
from wherewhen.domain.entities import EventEntity
from wherewhen.domain.enums import EventSource, EventStatus
from wherewhen.shared.telemetry.logging import get_logger
from wherewhen.shared.utils import generate_cuid, utc_now

if TYPE_CHECKING:
    from wherewhen.application.interfaces.repositories import IEventRepository
    from wherewhen.application.interfaces.services import IIdentityProvider
    from wherewhen.application.schemas.event import EventCreate, EventUpdate

logger = get_logger(__name__)


class EventLifecycleService(EventUseCase):
    """Create/update/status/delete for user events (DIP - depends on IEventRepository)"""

    def __init__(
        self,
        event_repo: "IEventRepository",
        validator: EventValidator | None = None,
        identity_provider: "IIdentityProvider | None" = None,
    ) -> None:
        super().__init__(event_repo, identity_provider)
        self.validator = validator or EventValidator()

    async def create_event(self, data: "EventCreate") -> EventEntity:
        """
        Create a user event and auto-join its organizer.

        Args:
            data: Event creation data

        Returns:
            The event as stored by the repository

        Raises:
            InvalidEventException: If a validity rule fails (nothing is persisted)
            EventOperationError: If the store fails unexpectedly
        """
        # 1. Validate input; the repository is never touched on failure
        title = self.validator.validate_title(data.title)
        self.validator.validate_schedule(data.date_time, data.end_date_time, require_future=True)
        self.validator.validate_capacity(data.max_attendees)

        # 2. Build the entity
        event = EventEntity(
            id=generate_cuid(),
            title=title,
            description=data.description,
            category=data.category,
            location=data.location,
            date_time=data.date_time,
            end_date_time=data.end_date_time,
            image_url=data.image_url,
            source=EventSource.USER_CREATED,
            organizer_id=data.organizer_id,
            price=data.price,
            max_attendees=data.max_attendees,
            status=EventStatus.ACTIVE,
            created_at=utc_now(),
        )

        # 3. Persist
        with translate_errors("create_event"):
            created = await self.event_repo.create_user_event(event)

        # 4. Organizer attends their own event
        await self._auto_join_organizer(created, data.organizer_id)

        logger.info("Created event %s by organizer %s", created.id, data.organizer_id)
        return created

    async def _auto_join_organizer(self, event: EventEntity, organizer_id: str) -> None:
        try:
            await self.event_repo.join_event(event.id, organizer_id)
        except Exception:
            logger.exception(
                "Auto-join of organizer %s failed for event %s", organizer_id, event.id
            )

    async def update_event(
        self, event_id: str, data: "EventUpdate", caller_id: str | None = None
    ) -> EventEntity:
        """
        Apply a partial update to a user event.

        Moving the start or end of an ACTIVE event marks it RESCHEDULED;
        other edits keep the current status. Only end-after-start is
        re-checked for dates, not future-ness.

        Raises:
            EventNotFoundException: If the event does not exist
            InvalidEventException: If a validity rule fails
            UnauthorizedEventAccessException: If caller_id is given and is not the organizer
        """
        existing = await self._load_event(event_id)
        self._require_user_created(existing, "update event")
        if caller_id is not None:
            self._require_organizer(existing, caller_id, "update")

        changes = data.changes()
        if "title" in changes:
            changes["title"] = self.validator.validate_title(changes["title"])
        if "max_attendees" in changes:
            self.validator.validate_capacity(changes["max_attendees"])

        date_time = changes.get("date_time", existing.date_time)
        end_date_time = changes.get("end_date_time", existing.end_date_time)
        self.validator.validate_schedule(date_time, end_date_time, require_future=False)

        dates_changed = (
            date_time != existing.date_time or end_date_time != existing.end_date_time
        )
        status = existing.status
        if dates_changed and existing.status == EventStatus.ACTIVE:
            status = EventStatus.RESCHEDULED

        updated = replace(existing, **changes, status=status, distance=None)

        with translate_errors("update_event"):
            saved = await self.event_repo.update_user_event(updated)

        logger.info("Updated event %s (status: %s)", saved.id, saved.status.value)
        return saved

    async def update_status(
        self, event_id: str, new_status: EventStatus, caller_id: str | None = None
    ) -> EventEntity:
        """
        Change the status of an event. Organizer only.

        Raises:
            EventNotFoundException: If the event does not exist
            UnauthorizedEventAccessException: If the caller is not the organizer
            InvalidEventException: If the transition is not allowed (e.g. out of CANCELLED)
        """
        existing = await self._load_event(event_id)
        caller = self._resolve_caller(caller_id, event_id, "update status")
        self._require_organizer(existing, caller, "update status")

        updated = existing.transition_to(new_status)

        with translate_errors("update_event_status"):
            saved = await self.event_repo.update_user_event(replace(updated, distance=None))

        logger.info(
            "Event %s status %s -> %s by %s",
            event_id,
            existing.status.value,
            saved.status.value,
            caller,
        )
        return saved

    async def delete_event(self, event_id: str, caller_id: str | None = None) -> None:
        """
        Delete a user event together with its attendance records.

        Raises:
            EventNotFoundException: If the event does not exist
            UnauthorizedEventAccessException: If caller_id is given and is not the organizer
        """
        existing = await self._load_event(event_id)
        self._require_user_created(existing, "delete event")
        if caller_id is not None:
            self._require_organizer(existing, caller_id, "delete")

        with translate_errors("delete_event"):
            await self.event_repo.delete_user_event(event_id)

        logger.info("Deleted event %s", event_id)
