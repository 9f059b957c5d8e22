"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from discuss.domain.value_objects.user_id import UserId
from discuss.domain.value_objects.topic_id import TopicId
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.comment_id import CommentId
from discuss.domain.value_objects.slug import Slug

__all__ = [
    "UserId",
    "TopicId",
    "PostId",
    "CommentId",
    "Slug",
]
