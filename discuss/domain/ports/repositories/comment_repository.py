"""
Comment Repository Port - Interface for comment persistence.
Implementation: discuss/infrastructure/persistence/prisma_comment_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from discuss.domain.entities.comment import Comment
from discuss.domain.value_objects.comment_id import CommentId


class CommentRepository(ABC):
    @abstractmethod
    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]: ...

    @abstractmethod
    async def create(self, comment: Comment) -> Comment: ...

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool: ...
