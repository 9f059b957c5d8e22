"""
Update Topic Command.

Only fields present in the form are written. A changed name re-runs slug
allocation (the topic's own slug is not a collision); an absent or
unchanged name keeps the current slug. Returns the resulting slug so the
caller can redirect.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.application.common.validation import FormSchema, validate_form
from discuss.application.services.slug_allocator import SlugAllocator
from discuss.domain.entities.topic import Topic
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.services.authorization import authorize_owner, enforce
from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId


@dataclass(frozen=True)
class UpdateTopicCommand(Command[MutationResult[str]]):
    context: RequestContext
    topic_id: TopicId
    form: Mapping[str, Any] = field(default_factory=dict)


class UpdateTopicHandler(MutationHandler[str]):
    def __init__(
        self,
        topic_repository: TopicRepository,
        slug_allocator: SlugAllocator,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ):
        super().__init__(session_resolver, notifier)
        self._topic_repository = topic_repository
        self._slug_allocator = slug_allocator

    async def _handle(self, command: UpdateTopicCommand) -> str:
        changes = validate_form(FormSchema.UPDATE_TOPIC, command.form)
        identity = await self._require_identity(command.context)

        topic = await self._topic_repository.get_by_id(command.topic_id)
        enforce(
            authorize_owner(identity, topic.owner_id if topic else None),
            resource="topic",
            action="update",
        )

        if not changes:
            return topic.slug.value

        if "name" in changes and changes["name"] != topic.name:

            async def write(slug: Slug) -> Topic | None:
                return await self._topic_repository.update(
                    topic.id, {**changes, "slug": slug.value}
                )

            updated = await self._slug_allocator.claim(
                changes["name"], write, exclude_topic_id=topic.id, operation="update"
            )
        else:
            updated = await self._topic_repository.update(topic.id, changes)

        if updated is None:
            # Deleted between the ownership check and the write
            raise EntityNotFoundError("Cannot find topic.", resource="topic")

        await self._invalidate(
            paths.home(),
            paths.topic_show(topic.slug.value),
            paths.topic_show(updated.slug.value),
        )
        return updated.slug.value
