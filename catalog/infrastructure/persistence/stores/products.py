"""SQLAlchemy store for Product entities."""

from __future__ import annotations

from catalog.domain.models.products import Product as DomainProduct
from catalog.infrastructure.persistence.models.products import Product as OrmProduct

from .base import SqlEntityStore


class SqlProductStore(SqlEntityStore[DomainProduct]):
    model = OrmProduct
    entity_name = "Product"

    @staticmethod
    def _to_domain(row: OrmProduct) -> DomainProduct:
        return DomainProduct(
            id=row.id,
            name=row.name,
            slug=row.slug,
            description=row.description,
            price=row.price,
            image=row.image,
            is_deleted=row.is_deleted,
            deleted_at=row.deleted_at,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
