"""
Prisma Post Repository Implementation.

Mapping:
- Prisma model fields: id, title, content, user_id, topic_id, created_at, updated_at
- Domain entity: Post with value objects (PostId, UserId, TopicId)
"""

from datetime import datetime, timezone
from typing import Mapping, Optional
from prisma import Prisma
from prisma.models import Post as PrismaPost
from discuss.domain.entities.post import Post
from discuss.domain.ports.repositories import PostRepository
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.topic_id import TopicId
from discuss.domain.value_objects.user_id import UserId
from discuss.infrastructure.persistence.prisma_errors import store_operation

_UPDATABLE_FIELDS = ("title", "content")


class PrismaPostRepository(PostRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaPost) -> Post:
        return Post(
            id=PostId(record.id),
            title=record.title,
            content=record.content,
            owner_id=UserId(record.user_id),
            topic_id=TopicId(record.topic_id),
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        async with store_operation("find"):
            record = await self._prisma.post.find_unique(where={"id": post_id.value})
        return self._to_entity(record) if record else None

    async def create(self, post: Post) -> Post:
        async with store_operation("create"):
            record = await self._prisma.post.create(
                data={
                    "id": post.id.value,
                    "title": post.title,
                    "content": post.content,
                    "user_id": post.owner_id.value,
                    "topic_id": post.topic_id.value,
                    "created_at": post.created_at,
                    "updated_at": post.updated_at,
                }
            )
        return self._to_entity(record)

    async def update(
        self, post_id: PostId, changes: Mapping[str, str]
    ) -> Optional[Post]:
        data = {key: changes[key] for key in _UPDATABLE_FIELDS if key in changes}
        data["updated_at"] = datetime.now(timezone.utc)
        async with store_operation("update"):
            record = await self._prisma.post.update(
                where={"id": post_id.value}, data=data
            )
        return self._to_entity(record) if record else None

    async def delete(self, post_id: PostId) -> bool:
        async with store_operation("delete"):
            record = await self._prisma.post.delete(where={"id": post_id.value})
        return record is not None
