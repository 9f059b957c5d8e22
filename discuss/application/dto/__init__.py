"""Form models (input) and entity DTOs (output)."""

from discuss.application.dto.forms import (
    CreateCommentForm,
    CreatePostForm,
    CreateTopicForm,
    UpdatePostForm,
    UpdateTopicForm,
)
from discuss.application.dto.topic import TopicDTO
from discuss.application.dto.post import PostDTO
from discuss.application.dto.comment import CommentDTO

__all__ = [
    "CreateCommentForm",
    "CreatePostForm",
    "CreateTopicForm",
    "UpdatePostForm",
    "UpdateTopicForm",
    "TopicDTO",
    "PostDTO",
    "CommentDTO",
]
