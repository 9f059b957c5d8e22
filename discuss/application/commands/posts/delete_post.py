"""
Delete Post Command.

Returns the parent topic id so the caller can navigate back to the topic.
The topic listing is invalidated by slug when the topic still exists, the
home listing otherwise.
"""

from dataclasses import dataclass

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import PostRepository, TopicRepository
from discuss.domain.services.authorization import authorize_owner, enforce
from discuss.domain.value_objects.post_id import PostId


@dataclass(frozen=True)
class DeletePostCommand(Command[MutationResult[str]]):
    context: RequestContext
    post_id: PostId


class DeletePostHandler(MutationHandler[str]):
    def __init__(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ):
        super().__init__(session_resolver, notifier)
        self._topic_repository = topic_repository
        self._post_repository = post_repository

    async def _handle(self, command: DeletePostCommand) -> str:
        identity = await self._require_identity(command.context)

        post = await self._post_repository.get_by_id(command.post_id)
        enforce(
            authorize_owner(identity, post.owner_id if post else None),
            resource="post",
            action="delete",
        )

        topic_id = post.topic_id
        topic = await self._topic_repository.get_by_id(topic_id)

        if not await self._post_repository.delete(post.id):
            raise EntityNotFoundError("Cannot find post.", resource="post")

        await self._invalidate(
            paths.topic_show(topic.slug.value) if topic else paths.home()
        )
        return topic_id.value
