from wherewhen.infrastructure.cache.event_cache import EventCache

__all__ = ["EventCache"]
