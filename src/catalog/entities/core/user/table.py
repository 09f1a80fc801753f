"""User database table model."""

from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    password_hash: str
