"""
Create Post Command.

The topic is resolved by slug before anything is written; a post always
references an existing topic.
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
from discuss.domain.value_objects.slug import Slug


@dataclass(frozen=True)
class CreatePostCommand(Command[MutationResult[Post]]):
    context: RequestContext
    topic_slug: Slug
    form: Mapping[str, Any] = field(default_factory=dict)


class CreatePostHandler(MutationHandler[Post]):
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

    async def _handle(self, command: CreatePostCommand) -> Post:
        fields = validate_form(FormSchema.CREATE_POST, command.form)
        identity = await self._require_identity(command.context)

        topic = await self._topic_repository.get_by_slug(command.topic_slug)
        if topic is None:
            raise EntityNotFoundError("Cannot find topic.", resource="topic")

        post = await self._post_repository.create(
            Post.create(
                title=fields["title"],
                content=fields["content"],
                owner_id=identity.id,
                topic_id=topic.id,
            )
        )

        await self._invalidate(paths.topic_show(topic.slug.value))
        return post
