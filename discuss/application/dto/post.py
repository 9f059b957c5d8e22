"""Post DTO for API responses."""

from pydantic import BaseModel
from datetime import datetime
from discuss.domain.entities.post import Post


class PostDTO(BaseModel):
    id: str
    title: str
    content: str
    owner_id: str
    topic_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, post: Post) -> "PostDTO":
        return cls(
            id=post.id.value,
            title=post.title,
            content=post.content,
            owner_id=post.owner_id.value,
            topic_id=post.topic_id.value,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
