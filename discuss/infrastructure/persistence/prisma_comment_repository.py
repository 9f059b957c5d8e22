"""Prisma Comment Repository Implementation."""

from typing import Optional
from prisma import Prisma
from prisma.models import Comment as PrismaComment
from discuss.domain.entities.comment import Comment
from discuss.domain.ports.repositories import CommentRepository
from discuss.domain.value_objects.comment_id import CommentId
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.user_id import UserId
from discuss.infrastructure.persistence.prisma_errors import store_operation


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        return Comment(
            id=CommentId(record.id),
            content=record.content,
            owner_id=UserId(record.user_id),
            post_id=PostId(record.post_id),
            created_at=record.created_at,
            parent_id=CommentId(record.parent_id) if record.parent_id else None,
        )

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        async with store_operation("find"):
            record = await self._prisma.comment.find_unique(
                where={"id": comment_id.value}
            )
        return self._to_entity(record) if record else None

    async def create(self, comment: Comment) -> Comment:
        async with store_operation("create"):
            record = await self._prisma.comment.create(
                data={
                    "id": comment.id.value,
                    "content": comment.content,
                    "user_id": comment.owner_id.value,
                    "post_id": comment.post_id.value,
                    "parent_id": comment.parent_id.value if comment.parent_id else None,
                    "created_at": comment.created_at,
                }
            )
        return self._to_entity(record)

    async def delete(self, comment_id: CommentId) -> bool:
        async with store_operation("delete"):
            record = await self._prisma.comment.delete(where={"id": comment_id.value})
        return record is not None
