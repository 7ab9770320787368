"""User repository."""

from __future__ import annotations

from catalog.domain.models.filters import NOT_DELETED, Equals
from catalog.domain.models.users import User, UserDraft

from .base import Repository


class UserRepository(Repository[User]):
    """Repository[User] plus lookup by email.

    Emails are stored lowercased, so find_by_email() is case-insensitive.
    """

    entity_name = "User"

    async def create(self, draft: UserDraft) -> User:  # type: ignore[override]
        return await super().create(draft.to_record())

    async def find_by_email(self, email: str) -> User | None:
        return await self._store.find_one((Equals("email", email.lower()), NOT_DELETED))
