"""Topic DTO for API responses."""

from pydantic import BaseModel
from datetime import datetime
from discuss.domain.entities.topic import Topic


class TopicDTO(BaseModel):
    id: str
    name: str
    slug: str
    description: str
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, topic: Topic) -> "TopicDTO":
        return cls(
            id=topic.id.value,
            name=topic.name,
            slug=topic.slug.value,
            description=topic.description,
            owner_id=topic.owner_id.value,
            created_at=topic.created_at,
            updated_at=topic.updated_at,
        )
