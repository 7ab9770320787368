"""Domain error taxonomy, framework-independent.

The transport layer maps these onto responses:
    NotFoundError    -> not found
    ValidationError  -> bad request
    anything else    -> server error
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every error raised by the catalog core."""


class ValidationError(CatalogError):
    """Raised when input is malformed before or at the store boundary."""


class NotFoundError(CatalogError):
    """Raised when a target entity is absent or hidden by the soft-delete filter."""

    def __init__(self, entity_type: str, key: object):
        self.entity_type = entity_type
        self.key = key
        super().__init__(f"{entity_type} '{key}' not found")


class StoreError(CatalogError):
    """Raised when the underlying persistence layer fails."""


class DuplicateKeyError(StoreError):
    """Raised when an insert or update violates a uniqueness constraint."""
