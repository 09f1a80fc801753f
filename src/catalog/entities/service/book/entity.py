"""Entity: Book."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import MAX_STORED_INT, MIN_STORED_INT, Entity


class Book(Entity):
    """Book entity representing a catalog record.

    ``id`` is either supplied by the caller (or the upstream catalog) or
    assigned by the store on insert. ``authors`` keeps its original order.
    """

    id: int | None = Field(
        default=None, ge=MIN_STORED_INT, le=MAX_STORED_INT, description="Catalog identifier"
    )
    title: str = Field(default="", description="Title")
    isbn: str | None = Field(default=None, description="ISBN, or the 'Null' sentinel")
    page_count: int = Field(
        default=0, ge=MIN_STORED_INT, le=MAX_STORED_INT, description="Number of pages"
    )
    authors: list[str] = Field(default_factory=list, description="Authors, in order")

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.isbn == other.isbn
            and self.page_count == other.page_count
            and self.authors == other.authors
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((
            self.id,
            self.title,
            self.isbn,
            self.page_count,
            tuple(self.authors),
        ))
