"""
Shared repository implementation.

Each entity gets one repository; all ORM statements for that entity live there.
``BaseRepository`` implements the operations every entity needs (create, lookup,
update, delete, filtered listing and counting) on top of ``self.model``, so the
concrete repositories only add their entity-specific queries.

Writes commit immediately. A unique-constraint violation raised by the database
is rolled back and reported as ``ConflictError`` naming the offending field,
which covers two requests racing past a service-level uniqueness check.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from postboard.core.errors import ConflictError
from postboard.core.logging_config import get_logger

from ..base import utc_now

logger = get_logger(__name__)

EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType]):
    """Async CRUD repository for one SQLModel table.

    Subclasses set:
        unique_fields: columns guarded by a unique constraint, checked in order
            when mapping an ``IntegrityError`` to a field
        ordering: default list order; a leading ``-`` sorts descending
    """

    unique_fields: Sequence[str] = ()
    ordering: Sequence[str] = ("id",)

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        self.session = session
        self.model = model

    def prepare(self, entity: EntityType) -> None:
        """Normalize an entity before it is written. No-op by default."""

    async def _commit(self, entity: EntityType) -> EntityType:
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # rollback expires the entity, so read the offending value first
            conflict = self._conflict(entity, e)
            await self.session.rollback()
            raise conflict from e
        await self.session.refresh(entity)
        return entity

    def _conflict(self, entity: EntityType, error: IntegrityError) -> ConflictError:
        message = str(error.orig).lower()
        field = next((name for name in self.unique_fields if name in message), None)
        if field is None and self.unique_fields:
            field = self.unique_fields[0]
        resource = self.model.__name__
        logger.info(f"Unique constraint violated on {resource}.{field}: {error.orig}")
        if field is None:
            return ConflictError(f"{resource} conflicts with an existing record")
        value = getattr(entity, field, None)
        return ConflictError(f"{resource} {field} '{value}' is already taken", field=field, value=value)

    async def create(self, entity: EntityType) -> EntityType:
        """Insert ``entity`` and return it with generated fields populated.

        Raises:
            ConflictError: a unique column already holds the value
        """
        self.prepare(entity)
        return await self._commit(entity)

    async def update(self, entity: EntityType) -> EntityType:
        """Persist changes made to ``entity`` and refresh ``updated_at``.

        Raises:
            ConflictError: a unique column already holds the value
        """
        self.prepare(entity)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()
        return await self._commit(entity)

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        return await self.get_by(id=entity_id)

    async def get_by(self, **criteria: Any) -> Optional[EntityType]:
        """Return the single row whose columns equal ``criteria``, or None."""
        stmt = select(self.model)
        for key, value in criteria.items():
            stmt = stmt.where(getattr(self.model, key) == value)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, field: str, value: Any, exclude_id: Optional[int] = None) -> bool:
        """Whether a row other than ``exclude_id`` has ``field == value``."""
        existing = await self.get_by(**{field: value})
        if existing is None:
            return False
        return exclude_id is None or existing.id != exclude_id

    async def delete(self, entity_id: int) -> bool:
        """Delete by primary key. Commits any pending work in the session too.

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List rows in ``ordering`` with optional equality filters and pagination."""
        stmt = QueryBuilder.apply_ordering(select(self.model), self.model, self.ordering)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count rows matching the same filters ``list`` accepts."""
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())


class QueryBuilder:
    """Statement helpers shared by the repositories."""

    @staticmethod
    def apply_filters(stmt, model: Type[SQLModel], filters: Dict[str, Any]):
        # None means "no filter" so optional query parameters pass straight through
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_ordering(stmt, model: Type[SQLModel], ordering: Sequence[str]):
        for name in ordering:
            column = getattr(model, name.lstrip("-"))
            stmt = stmt.order_by(column.desc() if name.startswith("-") else column)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
