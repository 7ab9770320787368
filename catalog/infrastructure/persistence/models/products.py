"""Catalog ORM model: products."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Double, Index, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from catalog.infrastructure.database import Base

from .base import EntityColumns


class Product(EntityColumns, Base):
    """Catalog product.

    slug is unique across the whole table, soft-deleted rows included.
    """

    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_products_slug"),
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        Index("ix_products_slug_is_deleted", "slug", "is_deleted"),
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Double, nullable=False, index=True)
    image: Mapped[str] = mapped_column(Text, nullable=False)  # URL
