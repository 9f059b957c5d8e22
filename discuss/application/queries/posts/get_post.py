"""Get Post Query."""

from dataclasses import dataclass
from discuss.application.common import Query, QueryHandler
from discuss.domain.entities.post import Post
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports.repositories import PostRepository
from discuss.domain.value_objects.post_id import PostId


@dataclass(frozen=True)
class GetPostQuery(Query[Post]):
    post_id: PostId


class GetPostHandler(QueryHandler[Post]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    async def execute(self, query: GetPostQuery) -> Post:
        post = await self._post_repository.get_by_id(query.post_id)
        if not post:
            raise EntityNotFoundError(
                f"Post {query.post_id.value} not found", resource="post"
            )
        return post
