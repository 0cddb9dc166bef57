"""Base repository: primary-key lookup, upsert, hard delete, error translation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apex.infrastructure.exceptions import (
    PersistenceConflictError,
    PersistenceException,
)
from apex.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository over one ORM model.

    Subclasses map ORM rows to domain entities. Writes flush but never
    commit; the caller's session scope owns the transaction. Driver errors
    surface as PersistenceConflictError (constraint violations) or
    PersistenceException (everything else).
    """

    entity_name: str = "entity"

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except IntegrityError as e:
            raise PersistenceConflictError(self.entity_name, str(e.orig)) from e
        except SQLAlchemyError as e:
            raise PersistenceException(f"{self.entity_name}.{operation}", str(e)) from e

    async def _get_orm_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single row by primary key, or None."""
        model: Any = self.model
        async with self._translate_errors("get_by_id"):
            result = await self.db.execute(select(self.model).where(model.id == entity_id))
            return result.scalar_one_or_none()

    async def _scalars(self, stmt: Any, operation: str) -> list[ModelType]:
        async with self._translate_errors(operation):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def _upsert(self, obj: ModelType) -> ModelType:
        """Insert or update by primary key (merge), flush, and return the attached row."""
        async with self._translate_errors("save"):
            merged = await self.db.merge(obj)
            await self.db.flush()
            await self.db.refresh(merged)
            return merged

    async def delete(self, entity_id: str) -> bool:
        """Hard delete by primary key. Returns True if a row was removed."""
        orm = await self._get_orm_by_id(entity_id)
        if orm is None:
            return False
        async with self._translate_errors("delete"):
            await self.db.delete(orm)
            await self.db.flush()
        return True
