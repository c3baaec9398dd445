"""
User controller.
"""

from __future__ import annotations

from typing import Optional

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse

from postboard.core.logging_config import get_logger
from postboard.core.models.io.posts import PostRead
from postboard.core.models.io.users import UserCreate, UserDeleted, UserRead, UserUpdate
from postboard.server.services.posts import PostService
from postboard.server.services.users import UserService

from .base import BaseController

logger = get_logger(__name__)


class UserController(BaseController):
    """Adapts user endpoints to ``UserService``."""

    read_schema = UserRead

    def __init__(self, user_service: UserService, post_service: PostService) -> None:
        self.user_service = user_service
        self.post_service = post_service

    async def create(self, payload: UserCreate, background_tasks: BackgroundTasks) -> JSONResponse:
        user = await self.user_service.register(payload, background_tasks)
        return self.created(user)

    async def get(self, user_id: int) -> JSONResponse:
        return self.ok(await self.user_service.get(user_id))

    async def list(self, limit: int, offset: int, is_active: Optional[bool] = None) -> JSONResponse:
        items, total = await self.user_service.list(limit=limit, offset=offset, is_active=is_active)
        logger.debug(f"Listed {len(items)} of {total} users (limit={limit}, offset={offset})")
        return self.paginated(items, total, limit, offset)

    async def update(self, user_id: int, payload: UserUpdate) -> JSONResponse:
        return self.ok(await self.user_service.update(user_id, payload))

    async def delete(self, user_id: int) -> JSONResponse:
        removed = await self.user_service.delete(user_id)
        return self.ok(UserDeleted(id=user_id, posts_deleted=removed))

    async def list_posts(
        self, user_id: int, limit: int, offset: int, published: Optional[bool] = None
    ) -> JSONResponse:
        items, total = await self.post_service.list_for_author(
            user_id, limit=limit, offset=offset, published=published
        )
        return self.paginated(items, total, limit, offset, schema=PostRead)
