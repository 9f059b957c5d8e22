"""Comments API Router."""

from typing import Any

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, Request, status
from pydantic import BaseModel

from discuss.application.commands.comments import (
    CreateCommentCommand,
    CreateCommentHandler,
    DeleteCommentCommand,
    DeleteCommentHandler,
)
from discuss.application.common.results import Failure
from discuss.application.dto.comment import CommentDTO
from discuss.domain.value_objects.comment_id import CommentId
from discuss.domain.value_objects.post_id import PostId
from discuss.presentation.api.responses import (
    failure_response,
    path_value,
    request_context,
)


class DeleteCommentResponse(BaseModel):
    post_id: str


router = APIRouter(tags=["comments"])


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_comment(
    post_id: str,
    request: Request,
    handler: FromDishka[CreateCommentHandler],
    payload: dict[str, Any] = Body(...),
):
    result = await handler.execute(
        CreateCommentCommand(
            context=request_context(request),
            post_id=path_value(PostId, post_id, "post"),
            form=payload,
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return CommentDTO.from_entity(result.value)


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
@inject
async def delete_comment(
    comment_id: str,
    request: Request,
    handler: FromDishka[DeleteCommentHandler],
):
    result = await handler.execute(
        DeleteCommentCommand(
            context=request_context(request),
            comment_id=path_value(CommentId, comment_id, "comment"),
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return DeleteCommentResponse(post_id=result.value)
