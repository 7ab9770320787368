"""SQLAlchemy store for User entities."""

from __future__ import annotations

from catalog.domain.models.enums import UserRole
from catalog.domain.models.users import User as DomainUser
from catalog.infrastructure.persistence.models.users import User as OrmUser

from .base import SqlEntityStore


class SqlUserStore(SqlEntityStore[DomainUser]):
    model = OrmUser
    entity_name = "User"

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
            role=UserRole(row.role),
            is_deleted=row.is_deleted,
            deleted_at=row.deleted_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
