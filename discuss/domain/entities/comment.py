"""
Comment Entity - A reply to a post, optionally nested under another comment.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from discuss.domain.value_objects.comment_id import CommentId
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.user_id import UserId


@dataclass
class Comment:
    id: CommentId
    content: str
    owner_id: UserId
    post_id: PostId
    created_at: datetime
    parent_id: Optional[CommentId] = None

    @classmethod
    def create(
        cls,
        content: str,
        owner_id: UserId,
        post_id: PostId,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        return cls(
            id=CommentId.generate(),
            content=content,
            owner_id=owner_id,
            post_id=post_id,
            created_at=datetime.now(timezone.utc),
            parent_id=parent_id,
        )
