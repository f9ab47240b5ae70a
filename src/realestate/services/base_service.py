"""
Shared service plumbing.

A service owns one request-scoped `AsyncSession`, builds its repositories on
it, and is the only layer that commits. Every public method runs inside
`translate_errors(...)`, so callers only ever see domain errors.
"""

from typing import Any, Awaitable, Callable, Generic, Iterable, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from realestate.exceptions import BusinessRuleViolationError, EntityNotFoundError
from realestate.exceptions.data_access import data_access
from realestate.exceptions.handler import related_entity_not_found, translate_errors, uniqueness_violation
from realestate.repositories.base_repository import BaseRepository

from .validation import FieldErrors

RepoT = TypeVar("RepoT", bound=BaseRepository)


class BaseService(Generic[RepoT]):
    """
    Subclasses set:
        entity_type: name used in errors and logs ("Client", "Deal", ...)
        repository_cls: the repository for the service's own entity
    """

    entity_type: str
    repository_cls: type[RepoT]

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo: RepoT = self.repository_cls(db)

    def errors(self, operation_type: str, entity_id: Any = None, description: str | None = None):
        """Error boundary for one service call."""
        return translate_errors(operation_type, self.entity_type, entity_id, description)

    def not_found(self, message: str) -> EntityNotFoundError:
        return EntityNotFoundError(self.entity_type, message=message)

    async def commit(self, operation_type: str, entity_id: Any = None) -> None:
        async with data_access(self.db, self.entity_type, operation_type, entity_id):
            await self.db.commit()

    # =================================================================================================================
    # Reads every service exposes
    # =================================================================================================================

    async def find_all(self) -> list:
        async with self.errors("SELECT", description=f"получение списка {self.entity_type}"):
            return await self.repo.find_all()

    async def find_by_id(self, entity_id: int):
        """Raises EntityNotFoundError when absent."""
        async with self.errors("SELECT", entity_id, f"поиск {self.entity_type} по id"):
            return await self.repo.find_by_id(entity_id)

    async def count(self) -> int:
        async with self.errors("SELECT", description=f"подсчет {self.entity_type}"):
            return await self.repo.count()

    async def exists(self, entity_id: int) -> bool:
        async with self.errors("SELECT", entity_id):
            return await self.repo.exists(entity_id)

    # =================================================================================================================
    # Writes
    # =================================================================================================================

    async def delete_guarded(
        self,
        entity_id: int,
        has_dependents: Callable[[int], Awaitable[bool]],
        rule_name: str,
        message: str,
    ) -> bool:
        """
        Delete unless `has_dependents(entity_id)` says other rows still point at
        the entity.

        The row is locked first, so the check and the delete happen in one
        transaction and no deal can be attached in between.
        """
        async with self.errors("DELETE", entity_id, f"удаление {self.entity_type}"):
            if not await self.repo.lock(entity_id):
                await self.db.rollback()
                return False

            if await has_dependents(entity_id):
                await self.db.rollback()
                raise BusinessRuleViolationError(rule_name, message, {"entity_id": entity_id})

            deleted = await self.repo.delete(entity_id)
            await self.commit("DELETE", entity_id)
            return deleted

    async def delete_by_id(self, entity_id: int) -> bool:
        async with self.errors("DELETE", entity_id, f"удаление {self.entity_type}"):
            deleted = await self.repo.delete(entity_id)
            await self.commit("DELETE", entity_id)
            return deleted

    # =================================================================================================================
    # Checks shared by the writing services
    # =================================================================================================================

    async def check_related(
        self,
        errors: FieldErrors,
        references: Iterable[tuple[str, BaseRepository, Any]],
    ) -> None:
        """
        Record a field error for every `(field, repository, id)` whose row is
        missing. Fields that already failed conversion, and absent ids, are
        skipped.
        """
        for field, repository, related_id in references:
            if related_id is None or field in errors:
                continue
            if not await repository.exists(related_id):
                error = related_entity_not_found(field, repository.entity, related_id, self.entity_type)
                errors.update(error.field_errors)

    async def check_unique(
        self,
        errors: FieldErrors,
        field: str,
        column,
        value: Any,
        exclude_id: int | None = None,
    ) -> None:
        if value is None or field in errors:
            return
        if await self.repo.exists_by_field(column, value, exclude_id):
            errors.update(uniqueness_violation(field, value, self.entity_type).field_errors)
