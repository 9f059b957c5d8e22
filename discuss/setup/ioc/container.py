"""
Dishka DI Container Setup.

- InfrastructureProvider maps every domain port to its concrete adapter
- HandlerProvider (handlers.py) builds the use cases on top of the ports
- Scope.APP = created once at startup (Prisma, Redis, JWT resolver)
- Scope.REQUEST = new instance per HTTP request (repositories, handlers)

Flow:
  Container → provides → PrismaTopicRepository → as → TopicRepository
                                    ↓
                      injected into CreateTopicHandler
"""

from typing import AsyncIterable

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prisma import Prisma
from redis.asyncio import Redis

from discuss.domain.ports import InvalidationNotifier, SessionResolver
from discuss.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    TopicRepository,
)
from discuss.infrastructure.auth import JwtSessionResolver
from discuss.infrastructure.cache import (
    RedisInvalidationNotifier,
    close_redis_client,
    create_redis_client,
)
from discuss.infrastructure.persistence import (
    PrismaCommentRepository,
    PrismaPostRepository,
    PrismaTopicRepository,
)
from discuss.setup.ioc.handlers import HandlerProvider


class InfrastructureProvider(Provider):
    """Concrete adapters for the domain ports."""

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - async because connect() is async
        - disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== CACHE ====================

    @provide(scope=Scope.APP)
    async def get_redis(self) -> AsyncIterable[Redis]:
        client = await create_redis_client()
        yield client
        await close_redis_client(client)

    @provide(scope=Scope.APP)
    def get_invalidation_notifier(self, redis: Redis) -> InvalidationNotifier:
        return RedisInvalidationNotifier(redis)

    # ==================== AUTH ====================

    @provide(scope=Scope.APP)
    def get_session_resolver(self) -> SessionResolver:
        return JwtSessionResolver()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, prisma: Prisma) -> TopicRepository:
        """
        Provide TopicRepository implementation.

        - Return type is ABSTRACT (TopicRepository)
        - Implementation is CONCRETE (PrismaTopicRepository)
        """
        return PrismaTopicRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, prisma: Prisma) -> PostRepository:
        return PrismaPostRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)


def create_container() -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE at app startup.
    """
    return make_async_container(InfrastructureProvider(), HandlerProvider())
