"""Collision-resistant ids for user-created events."""

from cuid2 import cuid_wrapper

_next_event_id = cuid_wrapper()


def generate_cuid() -> str:
    """New event id, unique across processes and hosts"""
    return str(_next_event_id())
