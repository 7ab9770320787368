"""Store port and the generic soft-delete repository.

EntityStore[T] is the persistence port: a narrow find/count/insert/update/
delete contract over typed filters.  The concrete adapter lives in
catalog/infrastructure/persistence/ and is wired at the application
boundary via get_repositories().

Repository[T] sits on top of any EntityStore and owns the policy that is
common to every entity:
  - soft-deleted records are invisible to default reads;
  - offset pagination issues the data and count queries concurrently;
  - soft delete and restore only flip is_deleted / deleted_at.

Design notes:
  - All methods are async; every call round-trips to the store and no
    records are cached between calls.
  - T is the domain model type (never an ORM row).
  - soft_delete() deliberately has no "not already deleted" guard while
    update_by_id() does; re-deleting is idempotent at this layer.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

from catalog.domain.models.entity import Entity, parse_id
from catalog.domain.models.filters import NOT_DELETED, Equals, Predicate
from catalog.domain.models.pagination import FindAllOptions, Page, SortKey, check_window

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class EntityStore(ABC, Generic[T]):
    """Abstract persistence port for one entity type."""

    @abstractmethod
    async def insert(self, data: Mapping[str, Any]) -> T:
        """Persist a new record; the store assigns id and timestamps.

        Raises DuplicateKeyError on a uniqueness violation.
        """

    @abstractmethod
    async def find_one(
        self, where: Sequence[Predicate], relations: Sequence[str] = ()
    ) -> T | None:
        """Return at most one record matching every predicate, or None."""

    @abstractmethod
    async def find_many(
        self,
        where: Sequence[Predicate],
        sort: Sequence[SortKey],
        skip: int = 0,
        limit: int | None = None,
        relations: Sequence[str] = (),
    ) -> list[T]:
        """Return the matching records ordered by sort, after skip, at most limit."""

    @abstractmethod
    async def count(self, where: Sequence[Predicate]) -> int:
        """Return the number of matching records, ignoring skip/limit."""

    @abstractmethod
    async def update_by_id(
        self, id: UUID, changes: Mapping[str, Any], where: Sequence[Predicate] = ()
    ) -> T | None:
        """Apply changes to the record with this id that also matches where.

        Refreshes updated_at and returns the post-update record, or None
        when no such record exists.
        """

    @abstractmethod
    async def delete_by_id(self, id: UUID) -> None:
        """Permanently remove the record.  No error when it does not exist."""


class Repository(Generic[T]):
    """Soft-delete aware repository for any entity with the Entity shape."""

    entity_name: ClassVar[str] = "Entity"

    def __init__(self, store: EntityStore[T]) -> None:
        self._store = store

    async def create(self, data: Mapping[str, Any]) -> T:
        return await self._store.insert(data)

    async def find_by_id(self, id: UUID | str, relations: Sequence[str] = ()) -> T | None:
        where = (Equals("id", parse_id(id)), NOT_DELETED)
        return await self._store.find_one(where, relations=relations)

    async def find_all(self, options: FindAllOptions | None = None) -> Page[T]:
        """Return one page of non-deleted records.

        The soft-delete predicate is AND-ed onto the caller's filter, so a
        caller-supplied is_deleted predicate can narrow but never widen
        the result.
        """
        options = options or FindAllOptions()
        return await self._paginate(
            (*options.filter, NOT_DELETED),
            page=options.page,
            limit=options.limit,
            sort=options.sort,
            relations=options.relations,
        )

    async def update_by_id(self, id: UUID | str, changes: Mapping[str, Any]) -> T | None:
        return await self._store.update_by_id(parse_id(id), changes, where=(NOT_DELETED,))

    async def soft_delete(self, id: UUID | str) -> T | None:
        changes = {"is_deleted": True, "deleted_at": datetime.now(timezone.utc)}
        return await self._store.update_by_id(parse_id(id), changes)

    async def restore(self, id: UUID | str) -> T | None:
        changes = {"is_deleted": False, "deleted_at": None}
        return await self._store.update_by_id(parse_id(id), changes)

    async def delete_by_id(self, id: UUID | str) -> None:
        await self._store.delete_by_id(parse_id(id))

    async def _paginate(
        self,
        where: Sequence[Predicate],
        page: int,
        limit: int,
        sort: Sequence[SortKey],
        relations: Sequence[str] = (),
    ) -> Page[T]:
        check_window(page, limit)
        skip = (page - 1) * limit
        logger.debug(
            "Paginating %s: page=%d limit=%d filter=%r", self.entity_name, page, limit, where
        )
        # Independent reads; totals may drift from data under concurrent writes.
        data, total_count = await asyncio.gather(
            self._store.find_many(where, sort, skip=skip, limit=limit, relations=relations),
            self._store.count(where),
        )
        return Page.build(data, total_count, page, limit)
