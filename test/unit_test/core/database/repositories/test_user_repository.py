"""Unit tests for user repository.

Session-level behaviour is checked with a mocked session; queries are checked
against an in-memory SQLite database.
"""

from __future__ import annotations

from datetime import timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from postboard.core.database.base import utc_now
from postboard.core.database.entities import User
from postboard.core.database.repositories import UserRepository
from postboard.core.errors import ConflictError

pytestmark = pytest.mark.asyncio


class TestUserRepositoryWithMockSession:
    """Tests for UserRepository session handling."""

    @pytest.fixture
    def mock_session(self):
        """Mock async database session."""
        session = AsyncMock()
        session.add = MagicMock()
        session.commit = AsyncMock()
        session.refresh = AsyncMock()
        session.delete = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session):
        return UserRepository(mock_session)

    async def test_create_lowercases_email_and_commits(self, repository, mock_session):
        user = User(email="MiXeD@Example.com", name="Mixed")

        result = await repository.create(user)

        assert result is user
        assert user.email == "mixed@example.com"
        mock_session.add.assert_called_once_with(user)
        mock_session.commit.assert_called_once()
        mock_session.refresh.assert_called_once_with(user)

    async def test_delete_not_found(self, repository, mock_session):
        result = MagicMock()
        result.scalar_one_or_none.return_value = None
        mock_session.execute = AsyncMock(return_value=result)

        assert await repository.delete(1) is False
        mock_session.delete.assert_not_called()
        mock_session.commit.assert_not_called()

    async def test_create_maps_unique_violation_to_conflict(self, repository, mock_session):
        mock_session.commit.side_effect = IntegrityError(
            "INSERT INTO users", {}, Exception("UNIQUE constraint failed: users.email")
        )
        mock_session.rollback = AsyncMock()

        with pytest.raises(ConflictError) as exc_info:
            await repository.create(User(email="Ada@Example.com", name="Ada"))

        assert exc_info.value.status_code == 409
        assert exc_info.value.details == {"field": "email", "value": "ada@example.com"}
        mock_session.rollback.assert_awaited_once()
        mock_session.refresh.assert_not_called()


class TestUserRepositoryQueries:
    """Tests for UserRepository against a real database."""

    @pytest.fixture
    def repository(self, session):
        return UserRepository(session)

    async def test_get_by_email_is_case_insensitive(self, repository):
        created = await repository.create(User(email="ada@example.com", name="Ada"))
        found = await repository.get_by_email("  ADA@Example.com ")
        assert found is not None and found.id == created.id

    async def test_email_exists_excludes_owner(self, repository):
        user = await repository.create(User(email="ada@example.com", name="Ada"))
        assert await repository.email_exists("ada@example.com") is True
        assert await repository.email_exists("ada@example.com", exclude_id=user.id) is False
        assert await repository.email_exists("nobody@example.com") is False

    async def test_update_refreshes_timestamp(self, repository):
        user = await repository.create(User(email="ada@example.com", name="Ada"))
        before = user.updated_at
        user.name = "Countess"
        updated = await repository.update(user)
        assert updated.name == "Countess"
        assert updated.updated_at >= before

    async def test_list_filter_and_count(self, repository):
        for i in range(4):
            await repository.create(User(email=f"u{i}@example.com", name=f"U{i}", is_active=i % 2 == 0))

        active = await repository.list(filters={"is_active": True})
        assert [u.email for u in active] == ["u0@example.com", "u2@example.com"]
        assert await repository.count({"is_active": False}) == 2
        assert await repository.count() == 4
        # None filters are ignored
        assert await repository.count({"is_active": None}) == 4

        page = await repository.list(limit=2, offset=1)
        assert [u.email for u in page] == ["u1@example.com", "u2@example.com"]

    async def test_delete(self, repository):
        user = await repository.create(User(email="ada@example.com", name="Ada"))
        assert await repository.delete(user.id) is True
        assert await repository.get_by_id(user.id) is None

    async def test_duplicate_email_raises_conflict_and_session_recovers(self, repository):
        await repository.create(User(email="ada@example.com", name="Ada"))

        with pytest.raises(ConflictError) as exc_info:
            await repository.create(User(email="ADA@example.com", name="Impostor"))
        assert exc_info.value.details["field"] == "email"

        await repository.create(User(email="grace@example.com", name="Grace"))
        assert await repository.count() == 2

    async def test_update_to_taken_email_raises_conflict(self, repository):
        await repository.create(User(email="ada@example.com", name="Ada"))
        grace = await repository.create(User(email="grace@example.com", name="Grace"))

        grace.email = "ada@example.com"
        with pytest.raises(ConflictError):
            await repository.update(grace)

        assert (await repository.get_by_email("grace@example.com")).name == "Grace"

    async def test_timestamps_are_written_with_timezone(self, repository):
        assert utc_now().tzinfo is timezone.utc
        assert User.__table__.c.created_at.type.timezone is True
        assert User.__table__.c.updated_at.type.timezone is True

        user = await repository.create(User(email="ada@example.com", name="Ada"))

        assert user.created_at is not None
        assert user.updated_at is not None
