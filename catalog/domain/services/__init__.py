"""Domain services package."""

from .products import ProductService

__all__ = ["ProductService"]
