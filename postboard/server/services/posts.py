"""
Post service.

Holds the business rules for posts: the author must exist, slugs are derived
from titles and must be unique, and ``published_at`` tracks publication.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from postboard.core.database.entities.posts import Post
from postboard.core.database.repositories import RepoBundle
from postboard.core.errors import ConflictError, NotFoundError
from postboard.core.logging_config import get_logger
from postboard.core.models.io.posts import PostCreate, PostUpdate
from postboard.server.validators import slugify, validate_pagination, validate_post_create, validate_post_update

logger = get_logger(__name__)


class PostService:
    """Service layer for posts."""

    def __init__(self, repos: RepoBundle) -> None:
        self.repos = repos

    async def _ensure_author(self, author_id: int) -> None:
        if await self.repos.users.get_by_id(author_id) is None:
            raise NotFoundError("User", author_id)

    async def _unique_slug(self, title: str, exclude_id: Optional[int] = None) -> str:
        slug = slugify(title)
        if await self.repos.posts.slug_exists(slug, exclude_id=exclude_id):
            raise ConflictError(f"A post with slug '{slug}' already exists", field="slug", value=slug)
        return slug

    async def create(self, data: PostCreate) -> Post:
        """
        Create a post, publishing it immediately when requested.

        Raises:
            ValidationError: invalid payload
            NotFoundError: author does not exist
            ConflictError: title produces a slug already in use
        """
        data = validate_post_create(data)
        await self._ensure_author(data.author_id)
        slug = await self._unique_slug(data.title)

        post = Post(author_id=data.author_id, title=data.title, slug=slug, body=data.body)
        if data.published:
            post.mark_published()
        post = await self.repos.posts.create(post)
        logger.info(f"Created post {post.id} for user {post.author_id}")
        return post

    async def get(self, post_id: int) -> Post:
        """
        Raises:
            NotFoundError: no such post
        """
        post = await self.repos.posts.get_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    async def get_by_slug(self, slug: str) -> Post:
        """
        Raises:
            NotFoundError: no post with this slug
        """
        post = await self.repos.posts.get_by_slug(slug)
        if post is None:
            raise NotFoundError("Post", slug)
        return post

    async def list(
        self,
        limit: int = 20,
        offset: int = 0,
        author_id: Optional[int] = None,
        published: Optional[bool] = None,
    ) -> Tuple[List[Post], int]:
        """Return one page of posts (newest first) and the total number of matches."""
        limit, offset = validate_pagination(limit, offset)
        filters = {"author_id": author_id, "published": published}
        items = await self.repos.posts.list(limit=limit, offset=offset, filters=filters)
        total = await self.repos.posts.count(filters)
        return items, total

    async def list_for_author(
        self, author_id: int, limit: int = 20, offset: int = 0, published: Optional[bool] = None
    ) -> Tuple[List[Post], int]:
        """
        List the posts of one user.

        Raises:
            NotFoundError: author does not exist
        """
        await self._ensure_author(author_id)
        limit, offset = validate_pagination(limit, offset)
        items = await self.repos.posts.list_by_author(author_id, limit=limit, offset=offset, published=published)
        total = await self.repos.posts.count({"author_id": author_id, "published": published})
        return items, total

    async def update(self, post_id: int, data: PostUpdate) -> Post:
        """
        Apply a partial update; a new title re-derives the slug.

        Raises:
            ValidationError: invalid or empty payload
            NotFoundError: no such post
            ConflictError: new title produces a slug already in use
        """
        data = validate_post_update(data)
        post = await self.get(post_id)

        changes = data.model_dump(exclude_unset=True)
        if "title" in changes:
            post.slug = await self._unique_slug(changes["title"], exclude_id=post_id)
        for key, value in changes.items():
            setattr(post, key, value)
        return await self.repos.posts.update(post)

    async def publish(self, post_id: int) -> Post:
        """Publish a post. Publishing twice keeps the first ``published_at``."""
        post = await self.get(post_id)
        if post.published:
            return post
        post.mark_published()
        return await self.repos.posts.update(post)

    async def unpublish(self, post_id: int) -> Post:
        """Return a post to draft state and clear ``published_at``."""
        post = await self.get(post_id)
        if not post.published:
            return post
        post.mark_unpublished()
        return await self.repos.posts.update(post)

    async def delete(self, post_id: int) -> None:
        """
        Raises:
            NotFoundError: no such post
        """
        if not await self.repos.posts.delete(post_id):
            raise NotFoundError("Post", post_id)
        logger.info(f"Deleted post {post_id}")
