"""
Topics API Router.

- Thin layer: builds a Command from the raw JSON body and the path
- The handler validates, authorizes and persists; the router only maps the
  MutationResult to an HTTP response

Flow:
  HTTP Request → Router → Command → Handler → Repository → Database
                                 ↓
  HTTP Response ← Router ← MutationResult ←
"""

from typing import Any

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Body, HTTPException, Request, status
from pydantic import BaseModel

from discuss.application.commands.topics import (
    CreateTopicCommand,
    CreateTopicHandler,
    DeleteTopicCommand,
    DeleteTopicHandler,
    UpdateTopicCommand,
    UpdateTopicHandler,
)
from discuss.application.common.results import Failure
from discuss.application.dto.topic import TopicDTO
from discuss.application.queries.topics import (
    GetTopicBySlugHandler,
    GetTopicBySlugQuery,
)
from discuss.domain.exceptions import EntityNotFoundError
from discuss.domain.value_objects.slug import Slug
from discuss.domain.value_objects.topic_id import TopicId
from discuss.presentation.api.responses import (
    failure_response,
    path_value,
    request_context,
)

# ==================== RESPONSE MODELS ====================


class UpdateTopicResponse(BaseModel):
    """Slug after the update; it changes when the topic was renamed."""

    slug: str


class DeleteTopicResponse(BaseModel):
    success: bool


# ==================== ROUTER ====================

router = APIRouter(prefix="/topics", tags=["topics"])


# ==================== ENDPOINTS ====================


@router.post("", response_model=TopicDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_topic(
    request: Request,
    handler: FromDishka[CreateTopicHandler],
    payload: dict[str, Any] = Body(...),
):
    """Create a topic; the response carries its allocated slug."""
    result = await handler.execute(
        CreateTopicCommand(context=request_context(request), form=payload)
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return TopicDTO.from_entity(result.value)


@router.patch("/{topic_id}", response_model=UpdateTopicResponse)
@inject
async def update_topic(
    topic_id: str,
    request: Request,
    handler: FromDishka[UpdateTopicHandler],
    payload: dict[str, Any] = Body(...),
):
    result = await handler.execute(
        UpdateTopicCommand(
            context=request_context(request),
            topic_id=path_value(TopicId, topic_id, "topic"),
            form=payload,
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return UpdateTopicResponse(slug=result.value)


@router.delete("/{topic_id}", response_model=DeleteTopicResponse)
@inject
async def delete_topic(
    topic_id: str,
    request: Request,
    handler: FromDishka[DeleteTopicHandler],
):
    result = await handler.execute(
        DeleteTopicCommand(
            context=request_context(request),
            topic_id=path_value(TopicId, topic_id, "topic"),
        )
    )
    if isinstance(result, Failure):
        return failure_response(result)
    return DeleteTopicResponse(success=True)


@router.get("/{slug}", response_model=TopicDTO)
@inject
async def get_topic(slug: str, handler: FromDishka[GetTopicBySlugHandler]):
    query = GetTopicBySlugQuery(slug=path_value(Slug, slug, "topic"))
    try:
        topic = await handler.execute(query)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return TopicDTO.from_entity(topic)
