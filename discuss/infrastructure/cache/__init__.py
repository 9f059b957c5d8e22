"""
Cache Layer - Redis client and view invalidation.
"""

from discuss.infrastructure.cache.redis_client import (
    close_redis_client,
    create_redis_client,
)
from discuss.infrastructure.cache.redis_invalidation_notifier import (
    RedisInvalidationNotifier,
)

__all__ = [
    "create_redis_client",
    "close_redis_client",
    "RedisInvalidationNotifier",
]
