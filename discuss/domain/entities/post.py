"""
Post Entity - A titled message inside a topic.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.topic_id import TopicId
from discuss.domain.value_objects.user_id import UserId


@dataclass
class Post:
    id: PostId
    title: str
    content: str
    owner_id: UserId
    topic_id: TopicId
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        owner_id: UserId,
        topic_id: TopicId,
    ) -> Post:
        """Factory method to create a new Post with a generated ID and timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=PostId.generate(),
            title=title,
            content=content,
            owner_id=owner_id,
            topic_id=topic_id,
            created_at=now,
            updated_at=now,
        )
