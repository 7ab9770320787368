"""Product domain models and slug derivation."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog.domain.exceptions import ValidationError

from .entity import Entity

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Derive a URL-safe slug from a product name.

    Lowercases, collapses every run of characters outside [a-z0-9] into a
    single hyphen and strips leading/trailing hyphens:

        slugify("Hello, World! 2024") == "hello-world-2024"
    """
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


class Product(Entity):
    """A catalog product.

    slug is unique across all products, deleted or not.  It is fixed at
    creation time and never recomputed when name changes.
    """

    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    image: str


class ProductDraft(BaseModel):
    """Field values for a product that does not exist yet."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    image: str
    slug: str | None = None

    def to_record(self) -> dict[str, Any]:
        """Insert payload with the slug resolved.

        An explicit slug is lowercased; otherwise it is derived from name.
        """
        slug = self.slug.lower() if self.slug else slugify(self.name)
        if not slug:
            raise ValidationError(f"Cannot derive a slug from name {self.name!r}")
        return {
            "name": self.name,
            "slug": slug,
            "description": self.description,
            "price": self.price,
            "image": self.image,
        }


class ProductChanges(BaseModel):
    """Partial update for a product.  Fields left as None are not written."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1)
    description: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    image: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
