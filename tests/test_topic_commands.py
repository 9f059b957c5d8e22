"""
Topic mutation tests: create, rename, delete.

Handlers run against the in-memory store with a fake session resolver
(bearer token == user id) and a recording invalidation notifier.
"""

import asyncio

import pytest

from discuss.application.commands.posts import CreatePostCommand
from discuss.application.commands.topics import (
    CreateTopicCommand,
    CreateTopicHandler,
    DeleteTopicCommand,
    UpdateTopicCommand,
    UpdateTopicHandler,
)
from discuss.application.common.results import FailureKind, Success
from discuss.application.services.slug_allocator import SlugAllocator
from discuss.domain.exceptions import StorageError
from discuss.domain.entities import Topic
from discuss.domain.value_objects import Slug, TopicId, UserId
from fakes import (
    ANONYMOUS,
    FailingNotifier,
    FakeSessionResolver,
    InMemoryTopicRepository,
    RecordingNotifier,
    as_user,
)

RUST = {"name": "rust-lang", "description": "A place to discuss Rust"}


async def _create(handler, user="u1", form=RUST):
    result = await handler.execute(CreateTopicCommand(context=as_user(user), form=form))
    assert isinstance(result, Success), result
    return result.value


class TestCreateTopic:
    @pytest.mark.asyncio
    async def test_scenario_same_name_gets_distinct_slugs(self, create_topic, store):
        first = await _create(create_topic, user="u1")
        second = await _create(create_topic, user="u2")

        assert first.slug.value == "rust-lang"
        assert second.slug.value == "rust-lang-1"
        assert first.owner_id.value == "u1"
        assert second.owner_id.value == "u2"
        assert len(store.topics) == 2

    @pytest.mark.asyncio
    async def test_invalidates_home(self, create_topic, notifier):
        await _create(create_topic)
        assert notifier.paths == ["/"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["ab", "Rust", "rust lang"])
    async def test_invalid_name_persists_nothing(self, create_topic, store, notifier, name):
        result = await create_topic.execute(
            CreateTopicCommand(context=as_user("u1"), form={**RUST, "name": name})
        )

        assert not result.ok
        assert result.kind is FailureKind.VALIDATION
        assert "name" in result.errors
        assert store.topics == {}
        assert notifier.paths == []

    @pytest.mark.asyncio
    async def test_anonymous_is_unauthenticated(self, create_topic, store):
        result = await create_topic.execute(CreateTopicCommand(context=ANONYMOUS, form=RUST))

        assert result.kind is FailureKind.UNAUTHENTICATED
        assert result.form_errors == ["You must be signed in to do this."]
        assert store.topics == {}

    @pytest.mark.asyncio
    async def test_validation_runs_before_authentication(self, create_topic):
        result = await create_topic.execute(CreateTopicCommand(context=ANONYMOUS, form={}))
        assert result.kind is FailureKind.VALIDATION

    @pytest.mark.asyncio
    async def test_reserved_name_gets_timestamp_suffix(self, create_topic):
        topic = await _create(
            create_topic, form={"name": "admin", "description": "Administrators only"}
        )
        assert topic.slug.value.startswith("admin-")
        assert topic.slug.value[len("admin-"):].isdigit()

    @pytest.mark.asyncio
    async def test_concurrent_creates_get_pairwise_distinct_slugs(
        self, store, session_resolver, notifier
    ):
        """N racing creates of the same name all succeed with unique slugs."""
        n = 5

        def handler():
            repository = InMemoryTopicRepository(store)
            allocator = SlugAllocator(repository, reserved_words=set(), max_attempts=10)
            return CreateTopicHandler(repository, allocator, session_resolver, notifier)

        results = await asyncio.gather(
            *(
                handler().execute(CreateTopicCommand(context=as_user(f"u{i}"), form=RUST))
                for i in range(n)
            )
        )

        assert all(r.ok for r in results)
        slugs = {r.value.slug.value for r in results}
        assert slugs == {"rust-lang"} | {f"rust-lang-{i}" for i in range(1, n)}
        assert len(store.topics) == n

    @pytest.mark.asyncio
    async def test_exhausted_retries_become_storage_failure(self, store):
        class AlwaysTaken(InMemoryTopicRepository):
            async def create(self, topic):
                raise StorageError("slug taken", "create", unique_violation=True)

        repository = AlwaysTaken(store)
        handler = CreateTopicHandler(
            repository,
            SlugAllocator(repository, reserved_words=set(), max_attempts=2),
            FakeSessionResolver(),
            RecordingNotifier(),
        )

        result = await handler.execute(CreateTopicCommand(context=as_user("u1"), form=RUST))

        assert result.kind is FailureKind.STORAGE
        assert "Could not allocate a unique slug" in result.form_errors[0]

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_storage_failure(self, store):
        class Broken(InMemoryTopicRepository):
            async def get_by_slug(self, slug):
                raise RuntimeError("boom")

        repository = Broken(store)
        handler = CreateTopicHandler(
            repository,
            SlugAllocator(repository),
            FakeSessionResolver(),
            RecordingNotifier(),
        )

        result = await handler.execute(CreateTopicCommand(context=as_user("u1"), form=RUST))

        assert result.kind is FailureKind.STORAGE
        assert result.form_errors == ["Something went wrong"]

    @pytest.mark.asyncio
    async def test_notifier_failure_does_not_change_result(
        self, topic_repository, slug_allocator, session_resolver, store
    ):
        handler = CreateTopicHandler(
            topic_repository, slug_allocator, session_resolver, FailingNotifier()
        )

        result = await handler.execute(CreateTopicCommand(context=as_user("u1"), form=RUST))

        assert result.ok
        assert len(store.topics) == 1


class TestUpdateTopic:
    @pytest.mark.asyncio
    async def test_unchanged_update_is_idempotent(self, create_topic, update_topic, store):
        topic = await _create(create_topic)
        writes_before = store.writes

        result = await update_topic.execute(
            UpdateTopicCommand(context=as_user("u1"), topic_id=topic.id, form=RUST)
        )

        assert result.value == "rust-lang"
        stored = store.topics[topic.id]
        assert stored.slug == topic.slug
        assert stored.name == topic.name
        assert stored.description == topic.description
        assert store.writes - writes_before <= 1

    @pytest.mark.asyncio
    async def test_empty_update_does_not_write(self, create_topic, update_topic, store):
        topic = await _create(create_topic)
        writes_before = store.writes

        result = await update_topic.execute(
            UpdateTopicCommand(context=as_user("u1"), topic_id=topic.id, form={})
        )

        assert result.value == "rust-lang"
        assert store.writes == writes_before

    @pytest.mark.asyncio
    async def test_description_only_keeps_slug(self, create_topic, update_topic, store):
        topic = await _create(create_topic)

        result = await update_topic.execute(
            UpdateTopicCommand(
                context=as_user("u1"),
                topic_id=topic.id,
                form={"description": "Systems programming talk"},
            )
        )

        assert result.value == "rust-lang"
        assert store.topics[topic.id].description == "Systems programming talk"

    @pytest.mark.asyncio
    async def test_rename_allocates_new_slug(
        self, create_topic, update_topic, store, notifier
    ):
        await _create(create_topic, form={"name": "go-lang", "description": "All about Go"})
        topic = await _create(create_topic)
        notifier.paths.clear()

        result = await update_topic.execute(
            UpdateTopicCommand(
                context=as_user("u1"), topic_id=topic.id, form={"name": "go-lang"}
            )
        )

        assert result.value == "go-lang-1"
        assert store.topics[topic.id].name == "go-lang"
        assert notifier.paths == ["/", "/topics/rust-lang", "/topics/go-lang-1"]

    @pytest.mark.asyncio
    async def test_other_identity_is_forbidden(self, create_topic, update_topic, store):
        topic = await _create(create_topic, user="u1")

        result = await update_topic.execute(
            UpdateTopicCommand(
                context=as_user("u2"),
                topic_id=topic.id,
                form={"description": "Hijacked description"},
            )
        )

        assert result.kind is FailureKind.FORBIDDEN
        assert result.form_errors == ["You are not authorized to update this topic."]
        assert store.topics[topic.id].description == RUST["description"]

    @pytest.mark.asyncio
    async def test_missing_topic(self, update_topic):
        result = await update_topic.execute(
            UpdateTopicCommand(
                context=as_user("u1"), topic_id=TopicId("nope"), form={}
            )
        )
        assert result.kind is FailureKind.NOT_FOUND
        assert result.form_errors == ["Cannot find topic."]


    @pytest.mark.asyncio
    async def test_rename_that_loses_slug_race_takes_next_counter(
        self, create_topic, store, session_resolver, notifier
    ):
        """Another topic lands the target slug between the probe and the write."""
        topic = await _create(create_topic)

        class RacedRepository(InMemoryTopicRepository):
            raced = False

            async def update(self, topic_id, changes):
                if changes.get("slug") == "go-lang" and not self.raced:
                    self.raced = True
                    await self.create(
                        Topic.create(
                            name="go-lang",
                            slug=Slug("go-lang"),
                            description="All about Go",
                            owner_id=UserId("u2"),
                        )
                    )
                return await super().update(topic_id, changes)

        repository = RacedRepository(store)
        handler = UpdateTopicHandler(
            repository,
            SlugAllocator(repository, reserved_words=set(), max_attempts=3),
            session_resolver,
            notifier,
        )

        result = await handler.execute(
            UpdateTopicCommand(
                context=as_user("u1"), topic_id=topic.id, form={"name": "go-lang"}
            )
        )

        assert result.value == "go-lang-1"
        assert repository.raced
        assert store.topics[topic.id].slug.value == "go-lang-1"
        assert len({t.slug for t in store.topics.values()}) == 2

    @pytest.mark.asyncio
    async def test_rename_exhaustion_is_update_storage_failure(
        self, create_topic, store, session_resolver, notifier
    ):
        topic = await _create(create_topic)

        class AlwaysTaken(InMemoryTopicRepository):
            async def update(self, topic_id, changes):
                raise StorageError("slug taken", "update", unique_violation=True)

        repository = AlwaysTaken(store)
        handler = UpdateTopicHandler(
            repository,
            SlugAllocator(repository, reserved_words=set(), max_attempts=2),
            session_resolver,
            notifier,
        )

        result = await handler.execute(
            UpdateTopicCommand(
                context=as_user("u1"), topic_id=topic.id, form={"name": "go-lang"}
            )
        )

        assert result.kind is FailureKind.STORAGE
        assert "Could not allocate a unique slug" in result.form_errors[0]
        assert store.topics[topic.id].slug.value == "rust-lang"


class TestDeleteTopic:
    @pytest.mark.asyncio
    async def test_owner_deletes_topic_and_posts(
        self, create_topic, create_post, delete_topic, store, notifier
    ):
        topic = await _create(create_topic)
        await create_post.execute(
            CreatePostCommand(
                context=as_user("u2"),
                topic_slug=topic.slug,
                form={"title": "Hello", "content": "First post content"},
            )
        )
        notifier.paths.clear()

        result = await delete_topic.execute(
            DeleteTopicCommand(context=as_user("u1"), topic_id=topic.id)
        )

        assert result.ok
        assert result.value is None
        assert store.topics == {}
        assert store.posts == {}
        assert notifier.paths == ["/", "/topics/rust-lang"]

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, create_topic, delete_topic, store):
        topic = await _create(create_topic, user="u1")

        result = await delete_topic.execute(
            DeleteTopicCommand(context=as_user("u2"), topic_id=topic.id)
        )

        assert result.kind is FailureKind.FORBIDDEN
        assert topic.id in store.topics
