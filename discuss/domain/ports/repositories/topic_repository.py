"""
Topic Repository Port - Interface for topic persistence.
Implementation: discuss/infrastructure/persistence/prisma_topic_repository.py

`create` and `update` must raise StorageError(unique_violation=True) when the
slug is already taken; the store's unique constraint is the final arbiter.
`delete` also removes the topic's posts.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional
from discuss.domain.entities.topic import Topic
from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId


class TopicRepository(ABC):
    @abstractmethod
    async def get_by_id(self, topic_id: TopicId) -> Optional[Topic]: ...

    @abstractmethod
    async def get_by_slug(self, slug: Slug) -> Optional[Topic]: ...

    @abstractmethod
    async def create(self, topic: Topic) -> Topic: ...

    @abstractmethod
    async def update(
        self, topic_id: TopicId, changes: Mapping[str, str]
    ) -> Optional[Topic]:
        """Write only the given fields; None when the topic no longer exists."""
        ...

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> bool: ...
