"""
Topic Entity - A named discussion area that groups posts.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone

from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId
from discuss.domain.value_objects.user_id import UserId


@dataclass
class Topic:
    id: TopicId
    name: str
    slug: Slug
    description: str
    owner_id: UserId
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(
        cls,
        name: str,
        slug: Slug,
        description: str,
        owner_id: UserId,
    ) -> Topic:
        """Factory method to create a new Topic with a generated ID and timestamps."""
        now = datetime.now(timezone.utc)
        return cls(
            id=TopicId.generate(),
            name=name,
            slug=slug,
            description=description,
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
        )
