"""Domain repositories.

EntityStore is the abstract persistence port; Repository and its
specialisations implement soft-delete and pagination policy on top of it.
Concrete stores live in catalog/infrastructure/persistence/ and are wired
at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
callers to specific repository module paths.
"""

from .base import EntityStore, Repository
from .products import ProductRepository
from .users import UserRepository

__all__ = [
    "EntityStore",
    "Repository",
    "ProductRepository",
    "UserRepository",
]
