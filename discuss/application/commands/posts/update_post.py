"""
Update Post Command. Owner only; writes just the fields present in the form.

The post page is invalidated under the slug of the topic the post actually
belongs to, whatever slug the caller routed through.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from discuss.application.common import Command, MutationResult
from discuss.application.common import paths
from discuss.application.common.mutation import MutationHandler
from discuss.application.common.validation import FormSchema, validate_form
from discuss.domain.entities.post import Post
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports import InvalidationNotifier, RequestContext, SessionResolver
from discuss.domain.ports.repositories import PostRepository, TopicRepository
from discuss.domain.services.authorization import authorize_owner, enforce
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.slug import Slug


@dataclass(frozen=True)
class UpdatePostCommand(Command[MutationResult[Post]]):
    context: RequestContext
    post_id: PostId
    topic_slug: Slug
    form: Mapping[str, Any] = field(default_factory=dict)


class UpdatePostHandler(MutationHandler[Post]):
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

    async def _handle(self, command: UpdatePostCommand) -> Post:
        changes = validate_form(FormSchema.UPDATE_POST, command.form)
        identity = await self._require_identity(command.context)

        post = await self._post_repository.get_by_id(command.post_id)
        enforce(
            authorize_owner(identity, post.owner_id if post else None),
            resource="post",
            action="edit",
        )

        if not changes:
            return post

        updated = await self._post_repository.update(post.id, changes)
        if updated is None:
            raise EntityNotFoundError("Cannot find post.", resource="post")

        topic = await self._topic_repository.get_by_id(updated.topic_id)
        if topic is not None:
            await self._invalidate(paths.post_show(topic.slug.value, updated.id.value))
        return updated
