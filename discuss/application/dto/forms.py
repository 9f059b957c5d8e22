"""
Form models - field rules for untrusted mutation input.

Create forms require every field. Update forms make every field optional,
but a field that is present must satisfy the same rule as on create.
"""

import re
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic_core import PydanticCustomError

TOPIC_NAME_PATTERN = re.compile(r"[a-z-]+")


def _check_topic_name(value: str) -> str:
    if not TOPIC_NAME_PATTERN.fullmatch(value):
        raise PydanticCustomError(
            "topic_name_format",
            "Must be lowercase letters or dashes without spaces",
        )
    return value


TopicName = Annotated[str, Field(min_length=3), AfterValidator(_check_topic_name)]
TopicDescription = Annotated[str, Field(min_length=10)]
PostTitle = Annotated[str, Field(min_length=3)]
PostContent = Annotated[str, Field(min_length=10)]
CommentContent = Annotated[str, Field(min_length=3)]


class FormModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class CreateTopicForm(FormModel):
    name: TopicName
    description: TopicDescription


class UpdateTopicForm(FormModel):
    name: Optional[TopicName] = None
    description: Optional[TopicDescription] = None


class CreatePostForm(FormModel):
    title: PostTitle
    content: PostContent


class UpdatePostForm(FormModel):
    title: Optional[PostTitle] = None
    content: Optional[PostContent] = None


class CreateCommentForm(FormModel):
    content: CommentContent
    parent_id: Optional[Annotated[str, Field(min_length=1)]] = None
