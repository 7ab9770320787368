"""Generic SQLAlchemy implementation of the EntityStore port.

Every operation opens its own short-lived AsyncSession from the session
factory, so two operations (e.g. a page query and its count) may run
concurrently.  Writes commit in their own transaction; there is no
cross-operation transaction.

Typed predicates are compiled to SQL clauses here; any field or relation
name the mapped class does not have is rejected with ValidationError.
SQLAlchemy failures are logged and re-raised as StoreError
(DuplicateKeyError for unique-constraint violations).
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import AsyncIterator, Mapping, Sequence
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

from sqlalchemy import ColumnElement, delete, func, inspect, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from catalog.domain.exceptions import DuplicateKeyError, StoreError, ValidationError
from catalog.domain.models.entity import Entity
from catalog.domain.models.filters import Before, Equals, Predicate, TextSearch
from catalog.domain.models.pagination import SortKey
from catalog.domain.repositories.base import EntityStore
from catalog.infrastructure.database import Base
from catalog.infrastructure.persistence.models.base import utcnow

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)

_UNIQUE_VIOLATION = "23505"  # PostgreSQL SQLSTATE


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally (escape char: backslash)."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == _UNIQUE_VIOLATION:
        return True
    return "unique" in str(orig).lower()


class SqlEntityStore(EntityStore[T], Generic[T]):
    """EntityStore[T] backed by one ORM class.

    Subclasses set `model` and implement `_to_domain`.
    """

    model: ClassVar[type[Base]]
    entity_name: ClassVar[str] = "Entity"

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    @staticmethod
    @abstractmethod
    def _to_domain(row: Any) -> T:
        """Map a loaded row to its domain model."""

    # ------------------------------------------------------------------ #
    # EntityStore API                                                      #
    # ------------------------------------------------------------------ #

    async def insert(self, data: Mapping[str, Any]) -> T:
        self._check_fields(data)
        now = utcnow()
        row = self.model(
            **{**data, "id": uuid4(), "is_deleted": False, "created_at": now, "updated_at": now}
        )
        async with self._session("insert") as session:
            async with session.begin():
                session.add(row)
                await session.flush()
                entity = self._to_domain(row)
        return entity

    async def find_one(
        self, where: Sequence[Predicate], relations: Sequence[str] = ()
    ) -> T | None:
        stmt = (
            select(self.model)
            .where(*self._compile(where))
            .options(*self._load(relations))
            .limit(1)
        )
        async with self._session("find_one") as session:
            result = await session.execute(stmt)
            row = result.scalar_one_or_none()
            return self._to_domain(row) if row else None

    async def find_many(
        self,
        where: Sequence[Predicate],
        sort: Sequence[SortKey],
        skip: int = 0,
        limit: int | None = None,
        relations: Sequence[str] = (),
    ) -> list[T]:
        stmt = (
            select(self.model)
            .where(*self._compile(where))
            .order_by(*self._order_by(sort))
            .options(*self._load(relations))
            .offset(skip)
            .limit(limit)
        )
        async with self._session("find_many") as session:
            result = await session.execute(stmt)
            return [self._to_domain(row) for row in result.scalars()]

    async def count(self, where: Sequence[Predicate]) -> int:
        stmt = select(func.count()).select_from(self.model).where(*self._compile(where))
        async with self._session("count") as session:
            return int(await session.scalar(stmt) or 0)

    async def update_by_id(
        self, id: UUID, changes: Mapping[str, Any], where: Sequence[Predicate] = ()
    ) -> T | None:
        self._check_fields(changes)
        stmt = select(self.model).where(
            self._column("id") == id, *self._compile(where)
        )
        async with self._session("update_by_id") as session:
            async with session.begin():
                result = await session.execute(stmt)
                row = result.scalar_one_or_none()
                if row is None:
                    return None
                for name, value in changes.items():
                    setattr(row, name, value)
                row.updated_at = utcnow()
                await session.flush()
                entity = self._to_domain(row)
        return entity

    async def delete_by_id(self, id: UUID) -> None:
        stmt = delete(self.model).where(self._column("id") == id)
        async with self._session("delete_by_id") as session:
            async with session.begin():
                await session.execute(stmt)

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                yield session
        except IntegrityError as exc:
            logger.error("%s %s violated a constraint: %s", self.entity_name, operation, exc.orig)
            if _is_unique_violation(exc):
                raise DuplicateKeyError(
                    f"{self.entity_name} {operation} violates a unique constraint"
                ) from exc
            raise StoreError(f"{self.entity_name} {operation} violates a constraint") from exc
        except SQLAlchemyError as exc:
            logger.error("%s %s failed: %s", self.entity_name, operation, exc)
            raise StoreError(f"{self.entity_name} {operation} failed") from exc

    def _column(self, name: str) -> Any:
        columns = inspect(self.model).columns
        if name not in columns:
            raise ValidationError(f"{self.entity_name} has no field {name!r}")
        return getattr(self.model, name)

    def _check_fields(self, data: Mapping[str, Any]) -> None:
        for name in data:
            self._column(name)

    def _compile(self, where: Sequence[Predicate]) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        for predicate in where:
            if isinstance(predicate, Equals):
                clauses.append(self._column(predicate.field) == predicate.value)
            elif isinstance(predicate, Before):
                clauses.append(self._column(predicate.field) < predicate.moment)
            elif isinstance(predicate, TextSearch):
                pattern = f"%{escape_like(predicate.term)}%"
                clauses.append(
                    or_(
                        *(
                            self._column(name).ilike(pattern, escape="\\")
                            for name in predicate.fields
                        )
                    )
                )
            else:
                raise ValidationError(f"Unsupported predicate: {predicate!r}")
        return clauses

    def _order_by(self, sort: Sequence[SortKey]) -> list[Any]:
        return [
            self._column(key.field).desc() if key.descending else self._column(key.field).asc()
            for key in sort
        ]

    def _load(self, relations: Sequence[str]) -> list[Any]:
        mapped = inspect(self.model).relationships
        options = []
        for name in relations:
            if name not in mapped:
                raise ValidationError(f"{self.entity_name} has no relation {name!r}")
            options.append(selectinload(getattr(self.model, name)))
        return options
