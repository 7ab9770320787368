"""Product repository: slug lookup, deleted listing and cursor pagination."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from catalog.domain.models.filters import NOT_DELETED, ONLY_DELETED, Before, Equals, Predicate
from catalog.domain.models.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    NEWEST_FIRST,
    RECENTLY_UPDATED_FIRST,
    CursorPage,
    Page,
    check_window,
)
from catalog.domain.models.products import Product, ProductDraft

from .base import Repository


class ProductRepository(Repository[Product]):
    """Repository[Product] plus product-specific reads.

    create() resolves the slug before insert; slugs are never recomputed
    afterwards, including on restore.
    """

    entity_name = "Product"

    async def create(self, draft: ProductDraft) -> Product:  # type: ignore[override]
        return await super().create(draft.to_record())

    async def find_by_slug(self, slug: str) -> Product | None:
        """Exact, non-deleted match.  Slugs are lowercased at write time."""
        return await self._store.find_one((Equals("slug", slug), NOT_DELETED))

    async def get_deleted_products(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        extra_filter: Sequence[Predicate] = (),
    ) -> Page[Product]:
        """Page through soft-deleted products, most recently updated first."""
        return await self._paginate(
            (*extra_filter, ONLY_DELETED),
            page=page,
            limit=limit,
            sort=RECENTLY_UPDATED_FIRST,
        )

    async def get_products_infinite_scroll(
        self,
        limit: int = DEFAULT_LIMIT,
        last_created_at: datetime | None = None,
    ) -> CursorPage[Product]:
        """Return the next batch of products older than last_created_at.

        No count query is issued.  has_more is a heuristic (a full batch
        came back), so the terminal batch can report has_more=True when
        exactly `limit` products remained.
        """
        check_window(DEFAULT_PAGE, limit)
        where: list[Predicate] = [NOT_DELETED]
        if last_created_at is not None:
            where.append(Before("created_at", last_created_at))

        data = await self._store.find_many(where, NEWEST_FIRST, limit=limit)
        return CursorPage(
            data=data,
            next_cursor=data[-1].created_at if data else None,
            has_more=len(data) == limit,
        )
