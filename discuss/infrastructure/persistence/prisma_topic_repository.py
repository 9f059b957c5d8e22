"""
Prisma Topic Repository Implementation.

Mapping:
- Prisma model fields: id, name, slug, description, user_id, created_at, updated_at
- Domain entity: Topic with value objects (TopicId, Slug, UserId)
- `slug` carries a unique index; a clash surfaces as
  StorageError(unique_violation=True)
- Posts are removed with their topic (onDelete: Cascade in schema.prisma)
"""

from datetime import datetime, timezone
from typing import Mapping, Optional
from prisma import Prisma
from prisma.models import Topic as PrismaTopic
from discuss.domain.entities.topic import Topic
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId
from discuss.domain.value_objects.user_id import UserId
from discuss.infrastructure.persistence.prisma_errors import store_operation

_UPDATABLE_FIELDS = ("name", "slug", "description")


class PrismaTopicRepository(TopicRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaTopic) -> Topic:
        """Map Prisma record to domain entity."""
        return Topic(
            id=TopicId(record.id),
            name=record.name,
            slug=Slug(record.slug),
            description=record.description,
            owner_id=UserId(record.user_id),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        async with store_operation("find"):
            record = await self._prisma.topic.find_unique(
                where={"id": topic_id.value}
            )
        return self._to_entity(record) if record else None

    async def get_by_slug(self, slug: Slug) -> Optional[Topic]:
        async with store_operation("find"):
            record = await self._prisma.topic.find_unique(where={"slug": slug.value})
        return self._to_entity(record) if record else None

    async def create(self, topic: Topic) -> Topic:
        async with store_operation("create"):
            record = await self._prisma.topic.create(
                data={
                    "id": topic.id.value,
                    "name": topic.name,
                    "slug": topic.slug.value,
                    "description": topic.description,
                    "user_id": topic.owner_id.value,
                    "created_at": topic.created_at,
                    "updated_at": topic.updated_at,
                }
            )
        return self._to_entity(record)

    async def update(
        self, topic_id: TopicId, changes: Mapping[str, str]
    ) -> Optional[Topic]:
        data = {key: changes[key] for key in _UPDATABLE_FIELDS if key in changes}
        data["updated_at"] = datetime.now(timezone.utc)
        async with store_operation("update"):
            record = await self._prisma.topic.update(
                where={"id": topic_id.value}, data=data
            )
        return self._to_entity(record) if record else None

    async def delete(self, topic_id: TopicId) -> bool:
        """Delete topic (and its posts) by ID. Returns True if deleted."""
        async with store_operation("delete"):
            record = await self._prisma.topic.delete(where={"id": topic_id.value})
        return record is not None
