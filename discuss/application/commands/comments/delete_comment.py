"""Delete Comment Command. Owner only; returns the post id the comment belonged to."""

from dataclasses import dataclass

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    TopicRepository,
)
from discuss.domain.services.authorization import authorize_owner, enforce
from discuss.domain.value_objects.comment_id import CommentId


@dataclass(frozen=True)
class DeleteCommentCommand(Command[MutationResult[str]]):
    context: RequestContext
    comment_id: CommentId


class DeleteCommentHandler(MutationHandler[str]):
    def __init__(
        self,
        topic_repository: TopicRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        session_resolver: SessionResolver,
        notifier: InvalidationNotifier,
    ):
        super().__init__(session_resolver, notifier)
        self._topic_repository = topic_repository
        self._post_repository = post_repository
        self._comment_repository = comment_repository

    async def _handle(self, command: DeleteCommentCommand) -> str:
        identity = await self._require_identity(command.context)

        comment = await self._comment_repository.get_by_id(command.comment_id)
        enforce(
            authorize_owner(identity, comment.owner_id if comment else None),
            resource="comment",
            action="delete",
        )

        post = await self._post_repository.get_by_id(comment.post_id)
        topic = (
            await self._topic_repository.get_by_id(post.topic_id) if post else None
        )

        if not await self._comment_repository.delete(comment.id):
            raise EntityNotFoundError("Cannot find comment.", resource="comment")

        if topic is not None:
            await self._invalidate(
                paths.post_show(topic.slug.value, comment.post_id.value)
            )
        return comment.post_id.value
