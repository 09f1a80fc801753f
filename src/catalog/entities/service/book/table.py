"""Book database table model."""

from sqlalchemy import JSON, Column
from sqlmodel import Field

from src.catalog.entities.core._base import EntityTable


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    ``authors`` is stored as serialised JSON text so its order survives the
    round trip on every supported backend.
    """

    __tablename__ = "books"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(default="")
    isbn: str | None = Field(default=None)
    page_count: int = Field(default=0)
    authors: list[str] = Field(
        default_factory=list, sa_column=Column(JSON, nullable=False)
    )
