"""User domain entity."""

from typing import Any

from pydantic import BaseModel, Field

from src.catalog.entities.core._base import Entity


class User(Entity):
    """A registered user.

    ``password_hash`` is the salted digest produced at registration.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    password_hash: str = Field(description="Salted one-way password digest")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return self.id == other.id and self.password_hash == other.password_hash

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.password_hash))


class UserRegistration(BaseModel):
    """Payload accepted by the register endpoint."""

    password: str = Field(description="Plaintext password")
