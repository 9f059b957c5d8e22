"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Raises StorageError on store failure (unique_violation flagged)
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from discuss.domain.ports.repositories.topic_repository import TopicRepository
from discuss.domain.ports.repositories.post_repository import PostRepository
from discuss.domain.ports.repositories.comment_repository import CommentRepository

__all__ = [
    "TopicRepository",
    "PostRepository",
    "CommentRepository",
]
