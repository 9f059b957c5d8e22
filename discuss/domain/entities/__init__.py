"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from discuss.domain.entities.identity import Identity
from discuss.domain.entities.topic import Topic
from discuss.domain.entities.post import Post
from discuss.domain.entities.comment import Comment

__all__ = [
    "Identity",
    "Topic",
    "Post",
    "Comment",
]
