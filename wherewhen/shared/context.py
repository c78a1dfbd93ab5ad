"""
Request context management using contextvars.

Provides async-safe storage for the authenticated caller so that use cases
can resolve "who is calling" without threading a user id through every call.

Usage:
    # In middleware or the presentation layer, after authentication:
    set_current_user(user_id="user123")

    # Anywhere downstream:
    user_id = get_current_user_id()  # Returns "user123" or None

    # Context is automatically scoped to the current task due to contextvars
"""

from contextvars import ContextVar

_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


def set_current_user(user_id: str | None) -> None:
    """Set the current user for this request/task."""
    _current_user_id.set(user_id)


def clear_current_user() -> None:
    """Clear the current user context."""
    _current_user_id.set(None)


def get_current_user_id() -> str | None:
    """Get the current user ID, or None if not authenticated."""
    return _current_user_id.get()


class ContextIdentityProvider:
    """IIdentityProvider reading the caller from the request context"""

    def current_user_id(self) -> str | None:
        return get_current_user_id()
