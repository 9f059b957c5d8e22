"""
Invalidation Notifier Port - Tells the view layer a cached path is stale.
Implementation: discuss/infrastructure/cache/redis_invalidation_notifier.py

Fire-and-forget: a failed notification never rolls back a mutation.
"""

from abc import ABC, abstractmethod


class InvalidationNotifier(ABC):
    @abstractmethod
    async def invalidate(self, path: str) -> None: ...
