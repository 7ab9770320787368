"""Typed query predicates.

A filter is a tuple of predicates combined with logical AND.  Only the
forms below are supported; the store adapter compiles each one to a SQL
clause, and matches() evaluates the same predicate against a domain object.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union


@dataclass(frozen=True)
class Equals:
    """field == value.  Also used for boolean flags such as is_deleted."""

    field: str
    value: Any

    def matches(self, record: object) -> bool:
        return getattr(record, self.field) == self.value


@dataclass(frozen=True)
class TextSearch:
    """Case-insensitive literal substring match, OR-ed across fields."""

    fields: tuple[str, ...]
    term: str

    def matches(self, record: object) -> bool:
        needle = self.term.lower()
        return any(needle in str(getattr(record, name)).lower() for name in self.fields)


@dataclass(frozen=True)
class Before:
    """field < moment (strict), for timestamp cursors."""

    field: str
    moment: datetime

    def matches(self, record: object) -> bool:
        return getattr(record, self.field) < self.moment


Predicate = Union[Equals, TextSearch, Before]
Filter = tuple[Predicate, ...]

NOT_DELETED = Equals("is_deleted", False)
ONLY_DELETED = Equals("is_deleted", True)


def matches_all(where: Sequence[Predicate], record: object) -> bool:
    """True when the record satisfies every predicate (an empty filter matches all)."""
    return all(predicate.matches(record) for predicate in where)
