"""Filtering and pagination over the book collection.

Filters run in memory over the rows loaded from the store, in store order;
no sort order is imposed. Matching is case-sensitive throughout.

ISBN matching differs per endpoint: the condition and ``/isbn/{isbn}``
filters use substring containment, while the keyword search only accepts an
exact ISBN.
"""

import math
from collections.abc import Sequence

from loguru import logger

from src.catalog.core.exceptions import NotFoundError, ValidationError
from src.catalog.entities.core._base import MAX_STORED_INT
from src.catalog.entities.service.book import Book, BookPage, BookRepository

PAGE_ERROR = "Page number must be greater than 0."
KEYWORD_ERROR = "Keyword is required."
NO_MATCH_ERROR = "No books found matching the search criteria."


def validate_pagination(page: int, page_size: int) -> None:
    if page <= 0 or page_size <= 0:
        raise ValidationError(PAGE_ERROR)


def paginate(books: Sequence[Book], page: int, page_size: int) -> BookPage:
    """Slice ``books`` into one page and compute totals over the whole input.

    Pages past the end are empty rather than an error.
    """
    validate_pagination(page, page_size)

    total_books = len(books)
    total_pages = math.ceil(total_books / page_size)
    start = (page - 1) * page_size

    return BookPage(
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_books=total_books,
        books=list(books[start:start + page_size]),
    )


def matches_author(book: Book, author: str) -> bool:
    return any(author in name for name in book.authors)


def matches_title(book: Book, title: str) -> bool:
    return title in (book.title or "")


def matches_isbn(book: Book, isbn: str) -> bool:
    return isbn in (book.isbn or "")


def matches_conditions(
    book: Book,
    author: str | None = None,
    title: str | None = None,
    isbn: str | None = None,
) -> bool:
    """AND of every supplied (non-empty) criterion."""
    if author and not matches_author(book, author):
        return False
    if title and not matches_title(book, title):
        return False
    if isbn and not matches_isbn(book, isbn):
        return False
    return True


def matches_keyword(book: Book, keyword: str) -> bool:
    """OR of title substring, any-author substring and exact ISBN."""
    return (
        matches_title(book, keyword)
        or matches_author(book, keyword)
        or book.isbn == keyword
    )


class BookQueryService:
    """Read-side operations behind the listing and search endpoints."""

    def __init__(self, repository: BookRepository) -> None:
        self._repository = repository

    def _filtered(self, predicate) -> list[Book]:
        return [book for book in self._repository.list_all() if predicate(book)]

    def list_range(self, page: int, page_size: int) -> list[Book]:
        """Plain offset listing with no totals and no validation.

        Offset and limit are clamped into the range the store can bind.
        """
        offset = min(max((page - 1) * page_size, 0), MAX_STORED_INT)
        limit = min(max(page_size, 0), MAX_STORED_INT)
        return self._repository.list_range(offset, limit)

    def find_by_conditions(
        self,
        author: str | None = None,
        title: str | None = None,
        isbn: str | None = None,
    ) -> list[Book]:
        return self._filtered(
            lambda book: matches_conditions(book, author=author, title=title, isbn=isbn)
        )

    def by_author(self, author: str, page: int, page_size: int) -> BookPage:
        validate_pagination(page, page_size)
        return paginate(
            self._filtered(lambda book: matches_author(book, author)), page, page_size
        )

    def by_title(self, title: str, page: int, page_size: int) -> BookPage:
        validate_pagination(page, page_size)
        return paginate(
            self._filtered(lambda book: matches_title(book, title)), page, page_size
        )

    def by_isbn(self, isbn: str, page: int, page_size: int) -> BookPage:
        validate_pagination(page, page_size)
        return paginate(
            self._filtered(lambda book: matches_isbn(book, isbn)), page, page_size
        )

    def search(self, keyword: str | None, page: int, page_size: int) -> BookPage:
        if keyword is None or not keyword.strip():
            raise ValidationError(KEYWORD_ERROR)
        validate_pagination(page, page_size)

        books = self._filtered(lambda book: matches_keyword(book, keyword))
        if not books:
            logger.info("Keyword search for {!r} matched nothing", keyword)
            raise NotFoundError(NO_MATCH_ERROR)

        return paginate(books, page, page_size)

