"""Comment DTO for API responses."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional
from discuss.domain.entities.comment import Comment


class CommentDTO(BaseModel):
    id: str
    content: str
    owner_id: str
    post_id: str
    parent_id: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentDTO":
        return cls(
            id=comment.id.value,
            content=comment.content,
            owner_id=comment.owner_id.value,
            post_id=comment.post_id.value,
            parent_id=comment.parent_id.value if comment.parent_id else None,
            created_at=comment.created_at,
        )
