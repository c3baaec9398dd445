"""
User service.

Holds the business rules for user accounts: case-insensitive e-mail uniqueness,
the welcome e-mail on registration and removal of a user's posts on deletion.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from fastapi import BackgroundTasks

from postboard.core.database.entities.users import User
from postboard.core.database.repositories import RepoBundle
from postboard.core.errors import ConflictError, NotFoundError
from postboard.core.logging_config import get_logger
from postboard.core.models.io.users import UserCreate, UserUpdate
from postboard.server.validators import validate_pagination, validate_user_create, validate_user_update

from .email import EmailService

logger = get_logger(__name__)


class UserService:
    """Service layer for user accounts."""

    def __init__(self, repos: RepoBundle, email_service: EmailService) -> None:
        self.repos = repos
        self.email_service = email_service

    async def register(self, data: UserCreate, background_tasks: Optional[BackgroundTasks] = None) -> User:
        """
        Register a new user.

        The welcome e-mail is queued on ``background_tasks`` so it is sent after the
        response; without a task queue no e-mail is sent.

        Raises:
            ValidationError: invalid payload
            ConflictError: e-mail already registered
        """
        data = validate_user_create(data)
        if await self.repos.users.email_exists(data.email):
            raise ConflictError(f"E-mail {data.email} is already registered", field="email", value=data.email)

        user = await self.repos.users.create(User(**data.model_dump()))
        logger.info(f"Registered user {user.id}")

        if background_tasks is not None:
            background_tasks.add_task(self.email_service.send_welcome_email, user.email, user.name)
        return user

    async def get(self, user_id: int) -> User:
        """
        Raises:
            NotFoundError: no such user
        """
        user = await self.repos.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def list(
        self, limit: int = 20, offset: int = 0, is_active: Optional[bool] = None
    ) -> Tuple[List[User], int]:
        """Return one page of users and the total number of matches."""
        limit, offset = validate_pagination(limit, offset)
        filters = {"is_active": is_active}
        items = await self.repos.users.list(limit=limit, offset=offset, filters=filters)
        total = await self.repos.users.count(filters)
        return items, total

    async def update(self, user_id: int, data: UserUpdate) -> User:
        """
        Apply a partial update.

        Raises:
            ValidationError: invalid or empty payload
            NotFoundError: no such user
            ConflictError: new e-mail belongs to another user
        """
        data = validate_user_update(data)
        user = await self.get(user_id)

        changes = data.model_dump(exclude_unset=True)
        if "email" in changes and await self.repos.users.email_exists(changes["email"], exclude_id=user_id):
            raise ConflictError(
                f"E-mail {changes['email']} is already registered", field="email", value=changes["email"]
            )

        for key, value in changes.items():
            setattr(user, key, value)
        return await self.repos.users.update(user)

    async def delete(self, user_id: int) -> int:
        """
        Delete a user together with their posts.

        Returns:
            Number of posts removed

        Raises:
            NotFoundError: no such user
        """
        await self.get(user_id)
        removed = await self.repos.posts.delete_by_author(user_id, commit=False)
        await self.repos.users.delete(user_id)
        logger.info(f"Deleted user {user_id} and {removed} post(s)")
        return removed
