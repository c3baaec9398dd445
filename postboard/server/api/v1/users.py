"""
User Endpoints.

Routes declare the HTTP shape only; all work is delegated to ``UserController``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Query, status

from postboard.core.models.io import Envelope, ErrorEnvelope, PostRead, UserCreate, UserDeleted, UserRead, UserUpdate
from postboard.server.services.deps import UserControllerDep

router = APIRouter(tags=["users"])

NOT_FOUND = {404: {"model": ErrorEnvelope, "description": "User not found"}}
INVALID = {400: {"model": ErrorEnvelope, "description": "Invalid payload"}}
CONFLICT = {409: {"model": ErrorEnvelope, "description": "E-mail already registered"}}


@router.post(
    "",
    response_model=Envelope[UserRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register User",
    description="Create a user account. A welcome e-mail is sent in the background after the response.",
    responses={**INVALID, **CONFLICT},
)
async def create_user(payload: UserCreate, background_tasks: BackgroundTasks, controller: UserControllerDep):
    return await controller.create(payload, background_tasks)


@router.get(
    "",
    response_model=Envelope[list[UserRead]],
    summary="List Users",
    description="List users ordered by ID, with pagination metadata.",
    responses=INVALID,
)
async def list_users(
    controller: UserControllerDep,
    limit: int = Query(default=20, description="Page size (1-100)"),
    offset: int = Query(default=0, description="Records to skip"),
    is_active: Optional[bool] = Query(default=None, description="Filter by account state"),
):
    return await controller.list(limit, offset, is_active)


@router.get(
    "/{user_id}",
    response_model=Envelope[UserRead],
    summary="Get User",
    responses=NOT_FOUND,
)
async def get_user(user_id: int, controller: UserControllerDep):
    return await controller.get(user_id)


@router.patch(
    "/{user_id}",
    response_model=Envelope[UserRead],
    summary="Update User",
    description="Partially update a user. Only provided fields change.",
    responses={**INVALID, **NOT_FOUND, **CONFLICT},
)
async def update_user(user_id: int, payload: UserUpdate, controller: UserControllerDep):
    return await controller.update(user_id, payload)


@router.delete(
    "/{user_id}",
    response_model=Envelope[UserDeleted],
    summary="Delete User",
    description="Delete a user and every post they wrote.",
    responses=NOT_FOUND,
)
async def delete_user(user_id: int, controller: UserControllerDep):
    return await controller.delete(user_id)


@router.get(
    "/{user_id}/posts",
    response_model=Envelope[list[PostRead]],
    summary="List User Posts",
    responses={**INVALID, **NOT_FOUND},
)
async def list_user_posts(
    user_id: int,
    controller: UserControllerDep,
    limit: int = Query(default=20, description="Page size (1-100)"),
    offset: int = Query(default=0, description="Records to skip"),
    published: Optional[bool] = Query(default=None, description="Filter by publication state"),
):
    return await controller.list_posts(user_id, limit, offset, published)
