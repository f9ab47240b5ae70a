"""
Base repository class providing the data-access operations every entity shares.

Repositories are the data access objects of the application: one per entity
(one per level for the geography hierarchy), each issuing parameterized SQL
through SQLAlchemy Core/ORM expressions on an injected `AsyncSession`.

Conventions:
- every statement runs inside `data_access(...)`, so callers only ever see a
  classified `DataAccessError` (or `FieldCoercionError` from partial updates);
- writes flush but never commit; the service owns the transaction;
- list queries always apply the entity's canonical order (`default_order`).
"""

import logging
import time
from typing import Any, Generic, Mapping, Type, TypeVar

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from realestate.database.base import Base
from realestate.exceptions.data_access import data_access

from .fields import FieldRegistry
from .row_mappers import DtoT, RowMapper

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository.

    Subclasses set:
        model: the mapped class
        default_order: tuple of ORDER BY expressions applied to every list
        update_fields: FieldRegistry for partial updates (None = read-only entity)
    """

    model: Type[ModelType]
    default_order: tuple = ()
    update_fields: FieldRegistry | None = None

    def __init__(self, db: AsyncSession, model: Type[ModelType] | None = None):
        """
        Args:
            db: the async session (request-scoped, injected by FastAPI)
            model: overrides the class-level `model` (used by generic tests)
        """
        self.db = db
        if model is not None:
            self.model = model

    # -----------------------------------------------------------------------------------------
    # helpers
    # -----------------------------------------------------------------------------------------

    @property
    def entity(self) -> str:
        return self.model.__name__

    @property
    def pk(self):
        return self.model.id

    def ordered(self, stmt: Select) -> Select:
        return stmt.order_by(*self.default_order) if self.default_order else stmt

    async def fetch_all(self, stmt: Select) -> list[ModelType]:
        async with data_access(self.db, self.entity, "SELECT"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def fetch_one_or_none(self, stmt: Select) -> ModelType | None:
        async with data_access(self.db, self.entity, "SELECT"):
            result = await self.db.execute(stmt)
            return result.scalars().first()

    async def fetch_scalar(self, stmt: Select) -> Any:
        async with data_access(self.db, self.entity, "SELECT"):
            result = await self.db.execute(stmt)
            return result.scalar()

    async def fetch_rows(self, stmt: Select, mapper: RowMapper) -> list[DtoT]:
        """Execute a joined read query and map every row to a DTO."""
        async with data_access(self.db, self.entity, "SELECT"):
            result = await self.db.execute(stmt)
            return [mapper(row) for row in result.mappings().all()]

    async def fetch_row(self, stmt: Select, mapper: RowMapper, entity_id: Any = None) -> DtoT:
        """Like fetch_rows for exactly one row; no row is a NOT_FOUND failure."""
        async with data_access(self.db, self.entity, "SELECT", entity_id):
            result = await self.db.execute(stmt)
            return mapper(result.mappings().one())

    # -----------------------------------------------------------------------------------------
    # reads
    # -----------------------------------------------------------------------------------------

    async def find_all(self) -> list[ModelType]:
        return await self.fetch_all(self.ordered(select(self.model)))

    async def find_where(self, stmt: Select) -> list[ModelType]:
        """Run an entity query (built by the subclass) in canonical order."""
        return await self.fetch_all(self.ordered(stmt))

    async def find_by_id(self, entity_id: int) -> ModelType:
        """
        Return the entity with `entity_id`.

        Raises:
            DataAccessError(kind=NOT_FOUND) when no row matches.
        """
        async with data_access(self.db, self.entity, "SELECT", entity_id):
            result = await self.db.execute(select(self.model).where(self.pk == entity_id))
            return result.scalar_one()

    async def get(self, entity_id: int) -> ModelType | None:
        return await self.fetch_one_or_none(select(self.model).where(self.pk == entity_id))

    async def find_one_by(self, column, value: Any) -> ModelType | None:
        """First row (canonical order) whose `column` equals `value`, or None."""
        stmt = self.ordered(select(self.model).where(column == value)).limit(1)
        return await self.fetch_one_or_none(stmt)

    async def exists(self, entity_id: int) -> bool:
        async with data_access(self.db, self.entity, "SELECT", entity_id):
            result = await self.db.execute(select(self.pk).where(self.pk == entity_id))
            found = result.scalar() is not None

        logger.debug("repo.exists", extra={"model": self.entity, "id": entity_id, "found": found})
        return found

    async def exists_by_field(self, column, value: Any, exclude_id: int | None = None) -> bool:
        """
        True when another row already holds `value` in `column`.

        `exclude_id` skips the row being updated, so re-saving an entity's own
        current value is not a conflict.
        """
        stmt = select(self.pk).where(column == value)
        if exclude_id is not None:
            stmt = stmt.where(self.pk != exclude_id)
        async with data_access(self.db, self.entity, "SELECT", exclude_id):
            result = await self.db.execute(stmt.limit(1))
            return result.scalar() is not None

    async def count(self) -> int:
        async with data_access(self.db, self.entity, "SELECT"):
            result = await self.db.execute(select(func.count()).select_from(self.model))
            return result.scalar() or 0

    async def lock(self, entity_id: int) -> bool:
        """
        Take a row lock on `entity_id` for the rest of the transaction
        (`SELECT ... FOR UPDATE`; a no-op on SQLite, which locks the whole
        database on write). Returns whether the row exists.
        """
        stmt = select(self.pk).where(self.pk == entity_id).with_for_update()
        async with data_access(self.db, self.entity, "SELECT", entity_id):
            result = await self.db.execute(stmt)
            return result.scalar() is not None

    # -----------------------------------------------------------------------------------------
    # writes
    # -----------------------------------------------------------------------------------------

    async def create(self, **values: Any) -> ModelType:
        """
        Insert a row and return it with its generated id.

        Logging:
        - DEBUG: start event with the provided keys (never values)
        - INFO: success with the new id and duration_ms
        """
        logger.debug(
            "repo.create.start",
            extra={"model": self.entity, "operation": "create", "provided_keys": sorted(values)},
        )
        start = time.perf_counter()

        async with data_access(self.db, self.entity, "INSERT"):
            entity = self.model(**values)
            self.db.add(entity)
            await self.db.flush()
            await self.db.refresh(entity)

        logger.info(
            "repo.create.success",
            extra={
                "model": self.entity,
                "operation": "create",
                "id": entity.id,
                "duration_ms": _elapsed_ms(start),
            },
        )
        return entity

    async def update(self, entity_id: int, updates: Mapping[str, Any] | None) -> bool:
        """
        Partial update driven by `update_fields`.

        - empty/absent map, or no recognized key: returns False, no statement runs
        - otherwise one UPDATE touching only the recognized keys; returns
          whether a row was affected

        Raises:
            FieldCoercionError: a recognized value could not be converted
        """
        if self.update_fields is None:
            raise TypeError(f"{self.entity} is read-only")

        values = self.update_fields.prepare(updates)
        if not values:
            logger.debug(
                "repo.update.noop",
                extra={"model": self.entity, "operation": "update", "id": entity_id},
            )
            return False

        start = time.perf_counter()
        # default synchronization keeps already loaded instances in step with the row
        stmt = update(self.model).where(self.pk == entity_id).values(**values)
        async with data_access(self.db, self.entity, "UPDATE", entity_id):
            result = await self.db.execute(stmt)

        updated = result.rowcount > 0
        logger.info(
            "repo.update.success" if updated else "repo.update.no_rows",
            extra={
                "model": self.entity,
                "operation": "update",
                "id": entity_id,
                "fields": sorted(values),
                "duration_ms": _elapsed_ms(start),
            },
        )
        return updated

    async def delete(self, entity_id: int) -> bool:
        async with data_access(self.db, self.entity, "DELETE", entity_id):
            result = await self.db.execute(delete(self.model).where(self.pk == entity_id))

        deleted = result.rowcount > 0
        logger.info(
            "repo.delete.success" if deleted else "repo.delete.no_rows",
            extra={"model": self.entity, "operation": "delete", "id": entity_id},
        )
        return deleted
