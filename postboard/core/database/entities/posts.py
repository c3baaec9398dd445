"""
Post entity models.

A post belongs to exactly one user through ``author_id``. The slug is derived
from the title and is unique across all posts.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, timestamp_column, utc_now


class PostBase(Base):
    """Base fields for a post."""

    author_id: int = Field(foreign_key="users.id", index=True, description="Owning user")
    title: str = Field(max_length=200, description="Post title")
    slug: str = Field(max_length=80, unique=True, index=True, description="URL-safe identifier derived from title")
    body: str = Field(description="Post content")
    published: bool = Field(default=False, description="Whether the post is publicly visible")
    published_at: Optional[datetime] = Field(
        default=None, sa_type=timestamp_column(), description="When the post was first published"
    )


class Post(PostBase, table=True):
    """Persistent post.

    Table: posts
    """

    __tablename__ = "posts"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column())
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=timestamp_column(), sa_column_kwargs={"onupdate": utc_now}
    )

    def mark_published(self) -> None:
        """Publish the post, keeping the original timestamp if it was already published."""
        if not self.published or self.published_at is None:
            self.published_at = utc_now()
        self.published = True

    def mark_unpublished(self) -> None:
        self.published = False
        self.published_at = None

    def __repr__(self) -> str:
        return f"Post(id={self.id}, slug={self.slug}, published={self.published})"
