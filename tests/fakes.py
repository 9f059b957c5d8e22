"""
In-memory doubles for the domain ports.

The repositories share one InMemoryStore and behave like the Prisma schema:
- topic slugs are unique (create/update raise StorageError(unique_violation=True))
- posts must reference an existing topic, comments an existing post
- deleting a topic removes its posts, deleting a post removes its comments

Reads yield to the event loop before looking at the store so concurrent
handlers interleave between probing a slug and writing it.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Mapping, Optional

from discuss.domain.entities import Comment, Identity, Post, Topic
from discuss.domain.exceptions import StorageError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    TopicRepository,
)
from discuss.domain.value_objects import CommentId, PostId, Slug, TopicId, UserId

ANONYMOUS = RequestContext()

FIXED_NOW_MS = 1718000000000


def as_user(user_id: str) -> RequestContext:
    """Request context whose bearer token FakeSessionResolver maps to `user_id`."""
    return RequestContext.from_headers({"Authorization": f"Bearer {user_id}"})


class InMemoryStore:
    def __init__(self):
        self.topics: dict[TopicId, Topic] = {}
        self.posts: dict[PostId, Post] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.writes = 0

    def slug_holder(self, slug: Slug) -> Optional[Topic]:
        return next((t for t in self.topics.values() if t.slug == slug), None)


class InMemoryTopicRepository(TopicRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        await asyncio.sleep(0)
        return self._store.topics.get(topic_id)

    async def get_by_slug(self, slug: Slug) -> Optional[Topic]:
        await asyncio.sleep(0)
        return self._store.slug_holder(slug)

    async def create(self, topic: Topic) -> Topic:
        await asyncio.sleep(0)
        if self._store.slug_holder(topic.slug) is not None:
            raise StorageError(
                f"Unique constraint failed on slug {topic.slug.value}",
                operation="create",
                unique_violation=True,
            )
        self._store.topics[topic.id] = topic
        self._store.writes += 1
        return topic

    async def update(
        self, topic_id: TopicId, changes: Mapping[str, str]
    ) -> Optional[Topic]:
        await asyncio.sleep(0)
        topic = self._store.topics.get(topic_id)
        if topic is None:
            return None
        values = {k: changes[k] for k in ("name", "description") if k in changes}
        if "slug" in changes:
            slug = Slug(changes["slug"])
            holder = self._store.slug_holder(slug)
            if holder is not None and holder.id != topic_id:
                raise StorageError(
                    f"Unique constraint failed on slug {slug.value}",
                    operation="update",
                    unique_violation=True,
                )
            values["slug"] = slug
        updated = replace(topic, updated_at=datetime.now(timezone.utc), **values)
        self._store.topics[topic_id] = updated
        self._store.writes += 1
        return updated

    async def delete(self, topic_id: TopicId) -> bool:
        await asyncio.sleep(0)
        if self._store.topics.pop(topic_id, None) is None:
            return False
        for post in [p for p in self._store.posts.values() if p.topic_id == topic_id]:
            _drop_post(self._store, post.id)
        self._store.writes += 1
        return True


def _drop_post(store: InMemoryStore, post_id: PostId) -> None:
    store.posts.pop(post_id, None)
    for comment_id in [c.id for c in store.comments.values() if c.post_id == post_id]:
        del store.comments[comment_id]


class InMemoryPostRepository(PostRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, post_id: PostId) -> Optional[Post]:
        await asyncio.sleep(0)
        return self._store.posts.get(post_id)

    async def create(self, post: Post) -> Post:
        await asyncio.sleep(0)
        if post.topic_id not in self._store.topics:
            raise StorageError("Foreign key constraint failed on topic_id", "create")
        self._store.posts[post.id] = post
        self._store.writes += 1
        return post

    async def update(
        self, post_id: PostId, changes: Mapping[str, str]
    ) -> Optional[Post]:
        await asyncio.sleep(0)
        post = self._store.posts.get(post_id)
        if post is None:
            return None
        values = {k: changes[k] for k in ("title", "content") if k in changes}
        updated = replace(post, updated_at=datetime.now(timezone.utc), **values)
        self._store.posts[post_id] = updated
        self._store.writes += 1
        return updated

    async def delete(self, post_id: PostId) -> bool:
        await asyncio.sleep(0)
        if post_id not in self._store.posts:
            return False
        _drop_post(self._store, post_id)
        self._store.writes += 1
        return True


class InMemoryCommentRepository(CommentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        await asyncio.sleep(0)
        return self._store.comments.get(comment_id)

    async def create(self, comment: Comment) -> Comment:
        await asyncio.sleep(0)
        if comment.post_id not in self._store.posts:
            raise StorageError("Foreign key constraint failed on post_id", "create")
        self._store.comments[comment.id] = comment
        self._store.writes += 1
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        await asyncio.sleep(0)
        if self._store.comments.pop(comment_id, None) is None:
            return False
        self._store.writes += 1
        return True


class FakeSessionResolver(SessionResolver):
    """The bearer token is taken as the user id."""

    async def resolve(self, context: RequestContext) -> Optional[Identity]:
        token = context.bearer_token
        if token is None:
            return None
        return Identity(id=UserId(token))


class RecordingNotifier(InvalidationNotifier):
    def __init__(self):
        self.paths: list[str] = []

    async def invalidate(self, path: str) -> None:
        self.paths.append(path)


class FailingNotifier(InvalidationNotifier):
    async def invalidate(self, path: str) -> None:
        raise ConnectionError("cache unreachable")
