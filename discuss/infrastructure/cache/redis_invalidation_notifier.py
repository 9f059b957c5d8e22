"""
Redis Invalidation Notifier - marks cached views stale.

Cache Strategy:
- The view layer caches rendered data under "{prefix}{path}", e.g. "view:/topics/rust-lang"
- invalidate(path) deletes that key so the next read recomputes it
- The path is also published on a channel so other view workers can drop
  their in-process copies

Error Handling:
- Invalidation is best effort freshness, not correctness
- Redis failures are logged as warnings and never raised
"""

import logging
from redis.asyncio import Redis
from discuss.config.settings import Config
from discuss.domain.ports.invalidation_notifier import InvalidationNotifier

logger = logging.getLogger(__name__)


class RedisInvalidationNotifier(InvalidationNotifier):
    def __init__(
        self,
        redis: Redis,
        prefix: str | None = None,
        channel: str | None = None,
    ):
        self._redis = redis
        self._prefix = Config.REDIS_VIEW_PREFIX if prefix is None else prefix
        self._channel = Config.REDIS_INVALIDATION_CHANNEL if channel is None else channel

    def _cache_key(self, path: str) -> str:
        return f"{self._prefix}{path}"

    async def invalidate(self, path: str) -> None:
        cache_key = self._cache_key(path)
        try:
            await self._redis.delete(cache_key)
            if self._channel:
                await self._redis.publish(self._channel, path)
            logger.debug(f"Cache INVALIDATED for {cache_key}")
        except Exception as e:
            logger.warning(f"Redis invalidation error for {cache_key}: {str(e)}")
