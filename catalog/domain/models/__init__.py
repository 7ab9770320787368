"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .entity import Entity, parse_id
from .enums import UserRole
from .filters import (
    NOT_DELETED,
    ONLY_DELETED,
    Before,
    Equals,
    Filter,
    Predicate,
    TextSearch,
    matches_all,
)
from .pagination import (
    NEWEST_FIRST,
    RECENTLY_UPDATED_FIRST,
    CursorPage,
    FindAllOptions,
    Page,
    SortKey,
)
from .products import Product, ProductChanges, ProductDraft, slugify
from .users import User, UserDraft

__all__ = [
    # Entity
    "Entity",
    "parse_id",
    # Enums
    "UserRole",
    # Filters
    "Before",
    "Equals",
    "Filter",
    "NOT_DELETED",
    "ONLY_DELETED",
    "Predicate",
    "TextSearch",
    "matches_all",
    # Pagination
    "CursorPage",
    "FindAllOptions",
    "NEWEST_FIRST",
    "Page",
    "RECENTLY_UPDATED_FIRST",
    "SortKey",
    # Products
    "Product",
    "ProductChanges",
    "ProductDraft",
    "slugify",
    # Users
    "User",
    "UserDraft",
]
