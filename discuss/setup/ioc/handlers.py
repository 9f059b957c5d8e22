"""
Handler Provider - wires command/query handlers to the domain ports.

The ports themselves (repositories, session resolver, notifier) come from
another provider: InfrastructureProvider in production, a fake-backed
provider in tests.

Flow:
  Container → provides → TopicRepository (port) → to → CreateTopicHandler
"""

from dishka import Provider, Scope, provide
from discuss.application.commands.comments import (
    CreateCommentHandler,
    DeleteCommentHandler,
)
from discuss.application.commands.posts import (
    CreatePostHandler,
    DeletePostHandler,
    UpdatePostHandler,
)
from discuss.application.commands.topics import (
    CreateTopicHandler,
    DeleteTopicHandler,
    UpdateTopicHandler,
)
from discuss.application.queries.posts import GetPostHandler
from discuss.application.queries.topics import GetTopicBySlugHandler
from discuss.application.services.slug_allocator import SlugAllocator
from discuss.domain.ports import InvalidationNotifier, SessionResolver
from discuss.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    TopicRepository,
)


class HandlerProvider(Provider):
    """Application use cases, one instance per request."""

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_slug_allocator(self, topic_repository: TopicRepository) -> SlugAllocator:
        return SlugAllocator(topic_repository)

    # ==================== TOPIC HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_topic_handler(
        self,
        topic_repository: TopicRepository,
        slug_allocator: SlugAllocator,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> CreateTopicHandler:
        """
        Provide CreateTopicHandler.

        - Parameters ask for ports (abstract types)
        - Dishka resolves them from whichever provider registered the port
        """
        return CreateTopicHandler(
            topic_repository, slug_allocator, session_resolver, notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_update_topic_handler(
        self,
        topic_repository: TopicRepository,
        slug_allocator: SlugAllocator,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> UpdateTopicHandler:
        return UpdateTopicHandler(
            topic_repository, slug_allocator, session_resolver, notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_topic_handler(
        self,
        topic_repository: TopicRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> DeleteTopicHandler:
        return DeleteTopicHandler(topic_repository, session_resolver, notifier)

    @provide(scope=Scope.REQUEST)
    def get_topic_by_slug_handler(
        self, topic_repository: TopicRepository
    ) -> GetTopicBySlugHandler:
        return GetTopicBySlugHandler(topic_repository)

    # ==================== POST HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_post_handler(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> CreatePostHandler:
        return CreatePostHandler(
            topic_repository, post_repository, session_resolver, notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_update_post_handler(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> UpdatePostHandler:
        return UpdatePostHandler(
            topic_repository, post_repository, session_resolver, notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_post_handler(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> DeletePostHandler:
        return DeletePostHandler(
            topic_repository, post_repository, session_resolver, notifier
        )

    @provide(scope=Scope.REQUEST)
    def get_post_handler(self, post_repository: PostRepository) -> GetPostHandler:
        return GetPostHandler(post_repository)

    # ==================== COMMENT HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_comment_handler(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> CreateCommentHandler:
        return CreateCommentHandler(
            topic_repository,
            post_repository,
            comment_repository,
            session_resolver,
            notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_handler(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ) -> DeleteCommentHandler:
        return DeleteCommentHandler(
            topic_repository,
            post_repository,
            comment_repository,
            session_resolver,
            notifier,
        )
