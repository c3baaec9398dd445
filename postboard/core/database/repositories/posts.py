"""
Post repository implementation.

This module provides data access operations for posts, including slug lookups
and per-author queries. Built exclusively on SQLModel for type-safe ORM operations.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.posts import Post
from .base import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for post data access operations using SQLModel.

    Lists are newest first, ties broken by descending ID.
    """

    unique_fields = ("slug",)
    ordering = ("-created_at", "-id")

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Post)

    async def get_by_slug(self, slug: str) -> Optional[Post]:
        return await self.get_by(slug=slug)

    async def slug_exists(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a slug is already used by another post.

        Args:
            slug: Slug to check
            exclude_id: Post ID to ignore (the post being updated)
        """
        return await self.exists("slug", slug, exclude_id=exclude_id)

    async def delete_by_author(self, author_id: int, commit: bool = True) -> int:
        """Delete every post written by a user.

        Args:
            author_id: Owning user ID
            commit: Commit immediately; pass False to let a following write commit it

        Returns:
            Number of posts deleted
        """
        stmt = sa_delete(Post).where(Post.author_id == author_id)
        result = await self.session.execute(stmt)
        if commit:
            await self.session.commit()
        return int(result.rowcount or 0)

    async def list_by_author(
        self,
        author_id: int,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        published: Optional[bool] = None,
    ) -> List[Post]:
        """List posts written by a user, newest first.

        Args:
            author_id: Owning user ID
            limit: Maximum records to return
            offset: Records to skip
            published: Restrict to published or draft posts
        """
        return await self.list(limit=limit, offset=offset, filters={"author_id": author_id, "published": published})
