"""Base shape shared by every repository-managed record.

These are pure domain objects with no ORM or persistence concerns.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from catalog.domain.exceptions import ValidationError


class Entity(BaseModel):
    """A persisted record with an identifier, lifecycle timestamps and a soft-delete flag.

    id, created_at and updated_at are assigned by the store on insert;
    updated_at is refreshed on every mutating write.  A record with
    is_deleted=True is retained in storage but hidden from default reads.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


def parse_id(value: UUID | str) -> UUID:
    """Coerce an identifier to UUID, raising ValidationError on a malformed value."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid identifier: {value!r}") from exc
