"""Delete Topic Command. The store removes the topic's posts with it."""

from dataclasses import dataclass

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.services.authorization import authorize_owner, enforce
from discuss.domain.value_objects.topic_id import TopicId


@dataclass(frozen=True)
class DeleteTopicCommand(Command[MutationResult[None]]):
    context: RequestContext
    topic_id: TopicId


class DeleteTopicHandler(MutationHandler[None]):
    def __init__(
        self,
        topic_repository: TopicRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ):
        super().__init__(session_resolver, notifier)
        self._topic_repository = topic_repository

    async def _handle(self, command: DeleteTopicCommand) -> None:
        identity = await self._require_identity(command.context)

        topic = await self._topic_repository.get_by_id(command.topic_id)
        enforce(
            authorize_owner(identity, topic.owner_id if topic else None),
            resource="topic",
            action="delete",
        )

        if not await self._topic_repository.delete(topic.id):
            raise EntityNotFoundError("Cannot find topic.", resource="topic")

        await self._invalidate(paths.home(), paths.topic_show(topic.slug.value))
