"""ORM model registry: imports every table module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from catalog.infrastructure.persistence.models.products import Product
from catalog.infrastructure.persistence.models.users import User

__all__ = [
    "Product",
    "User",
]
