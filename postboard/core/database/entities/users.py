"""
User entity models.

A user is the author of posts. E-mail addresses are unique and always stored
lowercase, so uniqueness is case-insensitive.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlmodel import Field

from ..base import Base, timestamp_column, utc_now


class UserBase(Base):
    """Base fields for a user."""

    email: str = Field(max_length=254, unique=True, index=True, description="Lowercase e-mail address")
    name: str = Field(max_length=100, description="Display name")
    bio: Optional[str] = Field(default=None, max_length=500, description="Short self description")
    is_active: bool = Field(default=True, description="Whether the account is active")


class User(UserBase, table=True):
    """Persistent user account.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=timestamp_column())
    updated_at: datetime = Field(
        default_factory=utc_now, sa_type=timestamp_column(), sa_column_kwargs={"onupdate": utc_now}
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
