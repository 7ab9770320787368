"""User domain models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .entity import Entity
from .enums import UserRole


class User(Entity):
    """A catalog user.

    email is unique and stored lowercased.  password_hash is opaque here;
    hashing and verification belong to the auth layer.
    """

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password_hash: str
    role: UserRole = UserRole.USER


class UserDraft(BaseModel):
    """Field values for a user that does not exist yet."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password_hash: str
    role: UserRole = UserRole.USER

    def to_record(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "email": self.email.lower(),
            "password_hash": self.password_hash,
            "role": self.role.value,
        }
