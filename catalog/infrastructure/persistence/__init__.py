"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports the store implementations and the DI factory.
"""

from catalog.infrastructure.persistence.models import *  # noqa: F401, F403
from catalog.infrastructure.persistence.models import __all__ as _orm_all
from catalog.infrastructure.persistence.stores import (
    Repositories,
    SqlEntityStore,
    SqlProductStore,
    SqlUserStore,
    get_repositories,
)

__all__ = _orm_all + [
    "Repositories",
    "SqlEntityStore",
    "SqlProductStore",
    "SqlUserStore",
    "get_repositories",
]
