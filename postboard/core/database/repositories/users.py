"""
User repository implementation.

This module provides data access operations for user accounts, including
lookups by e-mail used to enforce case-insensitive uniqueness.
Built exclusively on SQLModel for type-safe ORM operations.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.users import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel.

    E-mail addresses are stored lowercased; lookups accept any case.
    """

    unique_fields = ("email",)
    ordering = ("id",)

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, User)

    def prepare(self, user: User) -> None:
        user.email = user.email.lower()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by e-mail address, case-insensitively.

        Args:
            email: E-mail address in any case

        Returns:
            User instance or None
        """
        return await self.get_by(email=email.strip().lower())

    async def email_exists(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether an e-mail address is already taken.

        Args:
            email: E-mail address in any case
            exclude_id: User ID to ignore (the user being updated)

        Returns:
            True if another user owns the address
        """
        return await self.exists("email", email.strip().lower(), exclude_id=exclude_id)
