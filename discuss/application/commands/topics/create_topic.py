"""
Create Topic Command.

Flow:
1. Validate the raw form (name, description)
2. Resolve the acting identity; it becomes the owner
3. Claim a unique slug and persist the topic in one retried step
4. Invalidate the home listing
5. Return the created Topic (callers redirect to its slug)
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.application.common.validation import FormSchema, validate_form
from discuss.application.services.slug_allocator import SlugAllocator
from discuss.domain.entities.topic import Topic
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.value_objects.slug import Slug


@dataclass(frozen=True)
class CreateTopicCommand(Command[MutationResult[Topic]]):
    context: RequestContext
    form: Mapping[str, Any] = field(default_factory=dict)


class CreateTopicHandler(MutationHandler[Topic]):
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

    async def _handle(self, command: CreateTopicCommand) -> Topic:
        fields = validate_form(FormSchema.CREATE_TOPIC, command.form)
        identity = await self._require_identity(command.context)

        async def write(slug: Slug) -> Topic:
            topic = Topic.create(
                name=fields["name"],
                slug=slug,
                description=fields["description"],
                owner_id=identity.id,
            )
            return await self._topic_repository.create(topic)

        topic = await self._slug_allocator.claim(fields["name"], write)

        await self._invalidate(paths.home())
        return topic
