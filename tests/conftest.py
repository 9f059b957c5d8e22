import os

# Config reads the environment at import time
os.environ.setdefault("SERVICE_AUTH_SECRET", "test-secret")
os.environ.setdefault("SERVICE_AUTH_ISSUER", "discuss-auth")
os.environ.setdefault("SERVICE_AUTH_AUDIENCE", "discuss-api")
os.environ.setdefault("APP_ENV", "testing")

import pytest

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
from discuss.application.services.slug_allocator import SlugAllocator
from discuss.domain.services.slugs import DEFAULT_RESERVED_SLUGS
from fakes import (
    FIXED_NOW_MS,
    FakeSessionResolver,
    InMemoryCommentRepository,
    InMemoryPostRepository,
    InMemoryStore,
    InMemoryTopicRepository,
    RecordingNotifier,
)


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def topic_repository(store):
    return InMemoryTopicRepository(store)


@pytest.fixture()
def post_repository(store):
    return InMemoryPostRepository(store)


@pytest.fixture()
def comment_repository(store):
    return InMemoryCommentRepository(store)


@pytest.fixture()
def session_resolver():
    return FakeSessionResolver()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def slug_allocator(topic_repository):
    return SlugAllocator(
        topic_repository,
        reserved_words=DEFAULT_RESERVED_SLUGS,
        max_attempts=10,
        clock=lambda: FIXED_NOW_MS,
    )


@pytest.fixture()
def create_topic(topic_repository, slug_allocator, session_resolver, notifier):
    return CreateTopicHandler(topic_repository, slug_allocator, session_resolver, notifier)


@pytest.fixture()
def update_topic(topic_repository, slug_allocator, session_resolver, notifier):
    return UpdateTopicHandler(topic_repository, slug_allocator, session_resolver, notifier)


@pytest.fixture()
def delete_topic(topic_repository, session_resolver, notifier):
    return DeleteTopicHandler(topic_repository, session_resolver, notifier)


@pytest.fixture()
def create_post(topic_repository, post_repository, session_resolver, notifier):
    return CreatePostHandler(topic_repository, post_repository, session_resolver, notifier)


@pytest.fixture()
def update_post(topic_repository, post_repository, session_resolver, notifier):
    return UpdatePostHandler(topic_repository, post_repository, session_resolver, notifier)


@pytest.fixture()
def delete_post(topic_repository, post_repository, session_resolver, notifier):
    return DeletePostHandler(topic_repository, post_repository, session_resolver, notifier)


@pytest.fixture()
def create_comment(
    topic_repository, post_repository, comment_repository, session_resolver, notifier
):
    return CreateCommentHandler(
        topic_repository, post_repository, comment_repository, session_resolver, notifier
    )


@pytest.fixture()
def delete_comment(
    topic_repository, post_repository, comment_repository, session_resolver, notifier
):
    return DeleteCommentHandler(
        topic_repository, post_repository, comment_repository, session_resolver, notifier
    )
