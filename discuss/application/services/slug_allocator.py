"""
Slug Allocator - unique topic slugs from display names.

Algorithm:
1. base = normalize_name(name)                    "Rust Lang" -> "rust-lang"
2. candidate = base, or base-<epoch ms> when base is a reserved word
3. probe the store; while the candidate is taken try base-1, base-2, ...

Probing alone is check-then-act: two concurrent creators can both see a
free candidate. claim() therefore treats the store's unique constraint as
the arbiter. When the write fails with a unique violation the whole
allocate-and-write step is retried; the re-probe then sees the winner's
row and moves on to the next counter value.

Example Usage:
    allocator = SlugAllocator(topic_repository)
    topic = await allocator.claim(
        "rust-lang",
        lambda slug: topic_repository.create(Topic.create(..., slug=slug, ...)),
    )
"""

import logging
import time
from typing import AbstractSet, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
)

from discuss.config.settings import Config
from discuss.domain.exceptions import StorageError
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.services.slugs import (
    initial_candidate,
    normalize_name,
    numbered_candidate,
)
from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def _is_slug_race(error: BaseException) -> bool:
    return isinstance(error, StorageError) and error.unique_violation


class SlugAllocator:
    def __init__(
        self,
        topic_repository: TopicRepository,
        reserved_words: Optional[AbstractSet[str]] = None,
        max_attempts: Optional[int] = None,
        clock: Callable[[], int] = _epoch_ms,
    ):
        self._topic_repository = topic_repository
        self._reserved_words = (
            Config.RESERVED_SLUGS if reserved_words is None else reserved_words
        )
        self._max_attempts = (
            Config.SLUG_MAX_ATTEMPTS if max_attempts is None else max_attempts
        )
        if self._max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._clock = clock

    async def _is_taken(self, candidate: str, exclude_topic_id: Optional[TopicId]) -> bool:
        existing = await self._topic_repository.get_by_slug(Slug(candidate))
        if existing is None:
            return False
        # A topic never collides with its own current slug
        return exclude_topic_id is None or existing.id != exclude_topic_id

    async def allocate(
        self, name: str, exclude_topic_id: Optional[TopicId] = None
    ) -> Slug:
        """Return the first slug for `name` that no other topic currently holds."""
        base = normalize_name(name)
        candidate = initial_candidate(base, self._reserved_words, self._clock())
        counter = 1
        while await self._is_taken(candidate, exclude_topic_id):
            candidate = numbered_candidate(base, counter)
            counter += 1
        return Slug(candidate)

    async def claim(
        self,
        name: str,
        write: Callable[[Slug], Awaitable[T]],
        exclude_topic_id: Optional[TopicId] = None,
        operation: str = "create",
    ) -> T:
        """
        Allocate a slug and persist it through `write`, retrying on slug races.

        Args:
            name: Topic display name the slug derives from
            write: Persists the record with the given slug; must raise
                StorageError(unique_violation=True) if the slug was taken
            exclude_topic_id: Topic being renamed (its own slug is not a collision)
            operation: Store operation reported when retries run out

        Returns:
            Whatever `write` returns for the winning slug

        Raises:
            StorageError: non-uniqueness store failure, or retries exhausted
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            retry=retry_if_exception(_is_slug_race),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        try:
            async for attempt in retrying:
                with attempt:
                    slug = await self.allocate(name, exclude_topic_id=exclude_topic_id)
                    result = await write(slug)
        except RetryError as e:
            raise StorageError(
                f"Could not allocate a unique slug for '{name}' "
                f"after {self._max_attempts} attempts",
                operation=operation,
            ) from e
        return result
