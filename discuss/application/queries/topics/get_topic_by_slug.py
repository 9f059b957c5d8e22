"""Get Topic By Slug Query."""

from dataclasses import dataclass
from discuss.application.common import Query, QueryHandler
from discuss.domain.entities.topic import Topic
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.ports.repositories import TopicRepository
from discuss.domain.value_objects.slug import Slug


@dataclass(frozen=True)
class GetTopicBySlugQuery(Query[Topic]):
    slug: Slug


class GetTopicBySlugHandler(QueryHandler[Topic]):
    def __init__(self, topic_repository: TopicRepository):
        self._topic_repository = topic_repository

    async def execute(self, query: GetTopicBySlugQuery) -> Topic:
        topic = await self._topic_repository.get_by_slug(query.slug)
        if not topic:
            raise EntityNotFoundError(
                f"Topic {query.slug.value} not found", resource="topic"
            )
        return topic
