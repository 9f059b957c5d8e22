"""
Post Repository Port - Interface for post persistence.
Implementation: discuss/infrastructure/persistence/prisma_post_repository.py
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional
from discuss.domain.entities.post import Post
from discuss.domain.value_objects.post_id import PostId


class PostRepository(ABC):
    @abstractmethod
    async def get_by_id(self, post_id: PostId) -> Optional[Post]: ...

    @abstractmethod
    async def create(self, post: Post) -> Post: ...

    @abstractmethod
    async def update(
        self, post_id: PostId, changes: Mapping[str, str]
    ) -> Optional[Post]: ...

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool: ...
