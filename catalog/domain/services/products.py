"""Product application service.

Thin, stateless orchestration over ProductRepository:
  - turns a free-text `search` into a TextSearch over name and description;
  - turns "absent" results from lookups and mutations into NotFoundError.

Pagination and soft-delete policy stay in the repository.
"""

from __future__ import annotations

import logging
from datetime import datetime
from uuid import UUID

from catalog.domain.exceptions import NotFoundError
from catalog.domain.models.filters import Filter, TextSearch
from catalog.domain.models.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    CursorPage,
    FindAllOptions,
    Page,
)
from catalog.domain.models.products import Product, ProductChanges, ProductDraft
from catalog.domain.repositories.products import ProductRepository

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("name", "description")


def search_filter(search: str | None) -> Filter:
    """Case-insensitive substring match on name OR description; empty when no search."""
    if not search:
        return ()
    return (TextSearch(SEARCH_FIELDS, search),)


class ProductService:
    """Use cases for the product catalog."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def create_product(self, draft: ProductDraft) -> Product:
        product = await self._repository.create(draft)
        logger.info("Created product %s (slug=%s)", product.id, product.slug)
        return product

    async def list_products(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: str | None = None,
    ) -> Page[Product]:
        options = FindAllOptions(page=page, limit=limit, filter=search_filter(search))
        return await self._repository.find_all(options)

    async def list_deleted_products(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: str | None = None,
    ) -> Page[Product]:
        return await self._repository.get_deleted_products(page, limit, search_filter(search))

    async def list_products_infinite(
        self,
        limit: int = DEFAULT_LIMIT,
        cursor: datetime | None = None,
    ) -> CursorPage[Product]:
        return await self._repository.get_products_infinite_scroll(
            limit=limit, last_created_at=cursor
        )

    async def get_product_by_slug(self, slug: str) -> Product:
        product = await self._repository.find_by_slug(slug)
        if product is None:
            raise NotFoundError("Product", slug)
        return product

    async def update_product(self, product_id: UUID | str, changes: ProductChanges) -> Product:
        updated = await self._repository.update_by_id(product_id, changes.to_changes())
        if updated is None:
            # Missing, or already soft-deleted.
            raise NotFoundError("Product", product_id)
        logger.info("Updated product %s", updated.id)
        return updated

    async def delete_product(self, product_id: UUID | str) -> Product:
        deleted = await self._repository.soft_delete(product_id)
        if deleted is None:
            raise NotFoundError("Product", product_id)
        logger.info("Soft-deleted product %s", deleted.id)
        return deleted

    async def restore_product(self, product_id: UUID | str) -> Product:
        restored = await self._repository.restore(product_id)
        if restored is None:
            raise NotFoundError("Product", product_id)
        logger.info("Restored product %s", restored.id)
        return restored
