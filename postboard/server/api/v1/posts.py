"""
Post Endpoints.

Routes declare the HTTP shape only; all work is delegated to ``PostController``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status

from postboard.core.models.io import Envelope, ErrorEnvelope, PostCreate, PostDeleted, PostRead, PostUpdate
from postboard.server.services.deps import PostControllerDep

router = APIRouter(tags=["posts"])

NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "Post (or author) not found"}}
INVALID = {400: {"model": ErrorEnvelope, "description": "Invalid payload"}}
CONFLICT = {409: {"model": ErrorEnvelope, "description": "Slug already in use"}}


@router.post(
    "",
    response_model=Envelope[PostRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    description="Create a post for an existing user. The slug is derived from the title.",
    responses={**INVALID, **NOT_FOUND, **CONFLICT},
)
async def create_post(payload: PostCreate, controller: PostControllerDep):
    return await controller.create(payload)


@router.get(
    "",
    response_model=Envelope[list[PostRead]],
    summary="List Posts",
    description="List posts newest first, optionally filtered by author and publication state.",
    responses=INVALID,
)
async def list_posts(
    controller: PostControllerDep,
    limit: int = Query(default=20, description="Page size (1-100)"),
    offset: int = Query(default=0, description="Records to skip"),
    author_id: Optional[int] = Query(default=None, description="Filter by author"),
    published: Optional[bool] = Query(default=None, description="Filter by publication state"),
):
    return await controller.list(limit, offset, author_id, published)


@router.get(
    "/slug/{slug}",
    response_model=Envelope[PostRead],
    summary="Get Post by Slug",
    responses=NOT_FOUND,
)
async def get_post_by_slug(slug: str, controller: PostControllerDep):
    return await controller.get_by_slug(slug)


@router.get(
    "/{post_id}",
    response_model=Envelope[PostRead],
    summary="Get Post",
    responses=NOT_FOUND,
)
async def get_post(post_id: int, controller: PostControllerDep):
    return await controller.get(post_id)


@router.patch(
    "/{post_id}",
    response_model=Envelope[PostRead],
    summary="Update Post",
    description="Partially update title and/or body. A new title re-derives the slug.",
    responses={**INVALID, **NOT_FOUND, **CONFLICT},
)
async def update_post(post_id: int, payload: PostUpdate, controller: PostControllerDep):
    return await controller.update(post_id, payload)


@router.post(
    "/{post_id}/publish",
    response_model=Envelope[PostRead],
    summary="Publish Post",
    responses=NOT_FOUND,
)
async def publish_post(post_id: int, controller: PostControllerDep):
    return await controller.publish(post_id)


@router.post(
    "/{post_id}/unpublish",
    response_model=Envelope[PostRead],
    summary="Unpublish Post",
    responses=NOT_FOUND,
)
async def unpublish_post(post_id: int, controller: PostControllerDep):
    return await controller.unpublish(post_id)


@router.delete(
    "/{post_id}",
    response_model=Envelope[PostDeleted],
    summary="Delete Post",
    responses=NOT_FOUND,
)
async def delete_post(post_id: int, controller: PostControllerDep):
    return await controller.delete(post_id)
