"""
User I/O models for API requests and responses.

These schemas define the JSON contract for user endpoints and are kept apart
from the ``User`` entity so the API can evolve independently of the table.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str = Field(description="Lowercase e-mail address")
    name: str = Field(description="Display name")
    bio: Optional[str] = Field(default=None, description="Short self description")
    is_active: bool = Field(description="Whether the account is active")
    created_at: datetime
    updated_at: datetime


class UserCreate(BaseModel):
    """Schema for registering a user via the API."""

    email: str = Field(description="E-mail address, unique case-insensitively")
    name: str = Field(description="Display name")
    bio: Optional[str] = Field(default=None, description="Short self description")


class UserUpdate(BaseModel):
    """Schema for partially updating a user via the API."""

    email: Optional[str] = None
    name: Optional[str] = None
    bio: Optional[str] = None
    is_active: Optional[bool] = None


class UserDeleted(BaseModel):
    """Result of deleting a user."""

    id: int
    deleted: bool = True
    posts_deleted: int = 0
