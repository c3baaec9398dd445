"""
Post I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PostRead(BaseModel):
    """Schema for reading a post from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    slug: str = Field(description="URL-safe identifier derived from the title")
    body: str
    published: bool
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class PostCreate(BaseModel):
    """Schema for creating a post via the API."""

    author_id: int = Field(description="ID of the authoring user")
    title: str
    body: str
    published: bool = Field(default=False, description="Publish immediately")


class PostUpdate(BaseModel):
    """Schema for partially updating a post via the API.

    Publication state is changed through the publish/unpublish endpoints.
    """

    title: Optional[str] = None
    body: Optional[str] = None


class PostDeleted(BaseModel):
    """Result of deleting a post."""

    id: int
    deleted: bool = True
