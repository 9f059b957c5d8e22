"""
Posts API Router.

POST   /topics/{slug}/posts            create a post in a topic
PATCH  /topics/{slug}/posts/{post_id}  edit own post
DELETE /posts/{post_id}                delete own post, returns parent topic id
GET    /posts/{post_id}                read a post
"""

from typing import Any

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, HTTPException, Request, status
from pydantic import BaseModel

from discuss.application.commands.posts import (
    CreatePostCommand,
    CreatePostHandler,
    DeletePostCommand,
    DeletePostHandler,
    UpdatePostCommand,
    UpdatePostHandler,
)
from discuss.application.common.results import Failure
from discuss.application.dto.post import PostDTO
from discuss.application.queries.posts import GetPostHandler, GetPostQuery
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.value_objects.post_id import PostId
from discuss.domain.value_objects.slug import Slug
from discuss.presentation.api.responses import (
    failure_response,
    path_value,
    request_context,
)

class DeletePostResponse(BaseModel):
    topic_id: str


router = APIRouter(tags=["posts"])


@router.post(
    "/topics/{slug}/posts",
    response_model=PostDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_post(
    slug: str,
    request: Request,
    handler: FromDishka[CreatePostHandler],
    payload: dict[str, Any] = Body(...),
):
    result = await handler.execute(
        CreatePostCommand(
            context=request_context(request),
            topic_slug=path_value(Slug, slug, "topic"),
            form=payload,
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return PostDTO.from_entity(result.value)


@router.patch("/topics/{slug}/posts/{post_id}", response_model=PostDTO)
@inject
async def update_post(
    slug: str,
    post_id: str,
    request: Request,
    handler: FromDishka[UpdatePostHandler],
    payload: dict[str, Any] = Body(...),
):
    result = await handler.execute(
        UpdatePostCommand(
            context=request_context(request),
            post_id=path_value(PostId, post_id, "post"),
            topic_slug=path_value(Slug, slug, "topic"),
            form=payload,
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return PostDTO.from_entity(result.value)


@router.delete("/posts/{post_id}", response_model=DeletePostResponse)
@inject
async def delete_post(
    post_id: str,
    request: Request,
    handler: FromDishka[DeletePostHandler],
):
    result = await handler.execute(
        DeletePostCommand(
            context=request_context(request),
            post_id=path_value(PostId, post_id, "post"),
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return DeletePostResponse(topic_id=result.value)


@router.get("/posts/{post_id}", response_model=PostDTO)
@inject
async def get_post(post_id: str, handler: FromDishka[GetPostHandler]):
    query = GetPostQuery(post_id=path_value(PostId, post_id, "post"))
    try:
        post = await handler.execute(query)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return PostDTO.from_entity(post)
