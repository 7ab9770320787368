"""Concrete SQLAlchemy stores and repository wiring.

Exports the SqlStore classes and the get_repositories() factory used at
the application boundary to build domain repositories over them.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog.domain.repositories import ProductRepository, UserRepository
from catalog.infrastructure.database import AsyncSessionLocal

from .base import SqlEntityStore
from .products import SqlProductStore
from .users import SqlUserStore


@dataclass
class Repositories:
    """All repositories bound to a single session factory."""

    products: ProductRepository
    users: UserRepository


def get_repositories(
    session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal,
) -> Repositories:
    """Construct all repositories over SQL stores sharing one session factory.

    Each store operation opens its own session from the factory:

        repos = get_repositories()
        page = await repos.products.find_all(FindAllOptions(page=2))
    """
    return Repositories(
        products=ProductRepository(SqlProductStore(session_factory)),
        users=UserRepository(SqlUserStore(session_factory)),
    )


__all__ = [
    "SqlEntityStore",
    "SqlProductStore",
    "SqlUserStore",
    "Repositories",
    "get_repositories",
]
