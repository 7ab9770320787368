"""Shared fixtures: an in-memory EntityStore and repositories/services over it.

The in-memory store evaluates filters with the predicates' own matches(),
sorts stably key by key, and hands out strictly increasing timestamps so
ordering by created_at is deterministic.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from itertools import count
from uuid import uuid4

import pytest

from catalog.domain.exceptions import DuplicateKeyError
from catalog.domain.models import Product, User, matches_all
from catalog.domain.repositories import EntityStore, ProductRepository, UserRepository
from catalog.domain.services import ProductService

EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class InMemoryStore(EntityStore):
    def __init__(self, entity_cls, unique=()):
        self._entity_cls = entity_cls
        self._unique = unique
        self._ticks = count()
        self.records = {}
        self.calls = []

    def _now(self):
        return EPOCH + timedelta(seconds=next(self._ticks))

    async def insert(self, data):
        self.calls.append("insert")
        for field in self._unique:
            if any(getattr(r, field) == data.get(field) for r in self.records.values()):
                raise DuplicateKeyError(f"duplicate {field}: {data.get(field)!r}")
        now = self._now()
        record = self._entity_cls(id=uuid4(), created_at=now, updated_at=now, **data)
        self.records[record.id] = record
        return record

    async def find_one(self, where, relations=()):
        self.calls.append("find_one")
        return next((r for r in self.records.values() if matches_all(where, r)), None)

    async def find_many(self, where, sort, skip=0, limit=None, relations=()):
        self.calls.append("find_many")
        rows = [r for r in self.records.values() if matches_all(where, r)]
        for key in reversed(sort):
            rows.sort(key=lambda r, f=key.field: getattr(r, f), reverse=key.descending)
        end = None if limit is None else skip + limit
        return rows[skip:end]

    async def count(self, where):
        self.calls.append("count")
        return sum(1 for r in self.records.values() if matches_all(where, r))

    async def update_by_id(self, id, changes, where=()):
        self.calls.append("update_by_id")
        record = self.records.get(id)
        if record is None or not matches_all(where, record):
            return None
        updated = record.model_copy(update={**changes, "updated_at": self._now()})
        self.records[id] = updated
        return updated

    async def delete_by_id(self, id):
        self.calls.append("delete_by_id")
        self.records.pop(id, None)


@pytest.fixture
def product_store():
    return InMemoryStore(Product, unique=("slug",))


@pytest.fixture
def product_repo(product_store):
    return ProductRepository(product_store)


@pytest.fixture
def product_service(product_repo):
    return ProductService(product_repo)


@pytest.fixture
def user_store():
    return InMemoryStore(User, unique=("email",))


@pytest.fixture
def user_repo(user_store):
    return UserRepository(user_store)
