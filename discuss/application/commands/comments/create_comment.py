"""
Create Comment Command.

A comment belongs to an existing post. A reply names its parent comment,
which must exist and belong to the same post.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.application.common.validation import FormSchema, validate_form
from discuss.domain.entities.comment import Comment
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import (
    CommentRepository,
    PostRepository,
    TopicRepository,
)
from discuss.domain.value_objects.comment_id import CommentId
from discuss.domain.value_objects.post_id import PostId


@dataclass(frozen=True)
class CreateCommentCommand(Command[MutationResult[Comment]]):
    context: RequestContext
    post_id: PostId
    form: Mapping[str, Any] = field(default_factory=dict)


class CreateCommentHandler(MutationHandler[Comment]):
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

    async def _handle(self, command: CreateCommentCommand) -> Comment:
        fields = validate_form(FormSchema.CREATE_COMMENT, command.form)
        identity = await self._require_identity(command.context)

        post = await self._post_repository.get_by_id(command.post_id)
        if post is None:
            raise EntityNotFoundError("Cannot find post.", resource="post")

        parent_id = None
        if "parent_id" in fields:
            parent_id = CommentId(fields["parent_id"])
            parent = await self._comment_repository.get_by_id(parent_id)
            if parent is None or parent.post_id != post.id:
                raise EntityNotFoundError("Cannot find comment.", resource="comment")

        topic = await self._topic_repository.get_by_id(post.topic_id)
        comment = await self._comment_repository.create(
            Comment.create(
                content=fields["content"],
                owner_id=identity.id,
                post_id=post.id,
                parent_id=parent_id,
            )
        )

        if topic is not None:
            await self._invalidate(paths.post_show(topic.slug.value, post.id.value))
        return comment
