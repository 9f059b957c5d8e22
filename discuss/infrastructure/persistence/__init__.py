"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from discuss.infrastructure.persistence.prisma_topic_repository import (
    PrismaTopicRepository,
)
from discuss.infrastructure.persistence.prisma_post_repository import (
    PrismaPostRepository,
)
from discuss.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)

__all__ = [
    "PrismaTopicRepository",
    "PrismaPostRepository",
    "PrismaCommentRepository",
]
