"""Request and response shapes for the book endpoints and the upstream feed."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.catalog.entities.core._base import MAX_STORED_INT, MIN_STORED_INT

from .entity import Book

ISBN_SENTINEL = "Null"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookSummary(_CamelModel):
    """Projection returned by the sync endpoint; ``authors`` is flattened."""

    id: int
    title: str
    isbn: str
    page_count: int
    authors: str

    @classmethod
    def from_book(cls, book: Book) -> "BookSummary":
        return cls(
            id=book.id,
            title=book.title,
            isbn=book.isbn or ISBN_SENTINEL,
            page_count=book.page_count,
            authors=", ".join(book.authors),
        )


class BookPage(_CamelModel):
    """One page of a filtered book listing plus its totals."""

    page: int
    page_size: int
    total_pages: int
    total_books: int
    books: list[Book] = Field(default_factory=list)


class UpstreamBook(_CamelModel):
    """A record as published by the remote catalog API."""

    id: int = Field(ge=MIN_STORED_INT, le=MAX_STORED_INT)
    title: str = ""
    isbn: str | None = None
    page_count: int = Field(default=0, ge=MIN_STORED_INT, le=MAX_STORED_INT)
    authors: list[str] = Field(default_factory=list)

    @field_validator("title", "authors", mode="before")
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is None:
            return [] if info.field_name == "authors" else ""
        return value

    def to_book(self) -> Book:
        return Book(
            id=self.id,
            title=self.title,
            isbn=self.isbn,
            page_count=self.page_count,
            authors=list(self.authors),
        )
