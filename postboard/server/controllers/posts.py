"""
Post controller.
"""

from __future__ import annotations

from typing import Optional

from fastapi.responses import JSONResponse

from postboard.core.models.io.posts import PostCreate, PostDeleted, PostRead, PostUpdate
from postboard.server.services.posts import PostService

from .base import BaseController


class PostController(BaseController):
    """Adapts post endpoints to ``PostService``."""

    read_schema = PostRead

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def create(self, payload: PostCreate) -> JSONResponse:
        return self.created(await self.post_service.create(payload))

    async def get(self, post_id: int) -> JSONResponse:
        return self.ok(await self.post_service.get(post_id))

    async def get_by_slug(self, slug: str) -> JSONResponse:
        return self.ok(await self.post_service.get_by_slug(slug))

    async def list(
        self,
        limit: int,
        offset: int,
        author_id: Optional[int] = None,
        published: Optional[bool] = None,
    ) -> JSONResponse:
        items, total = await self.post_service.list(
            limit=limit, offset=offset, author_id=author_id, published=published
        )
        return self.paginated(items, total, limit, offset)

    async def update(self, post_id: int, payload: PostUpdate) -> JSONResponse:
        return self.ok(await self.post_service.update(post_id, payload))

    async def publish(self, post_id: int) -> JSONResponse:
        return self.ok(await self.post_service.publish(post_id))

    async def unpublish(self, post_id: int) -> JSONResponse:
        return self.ok(await self.post_service.unpublish(post_id))

    async def delete(self, post_id: int) -> JSONResponse:
        await self.post_service.delete(post_id)
        return self.ok(PostDeleted(id=post_id))
