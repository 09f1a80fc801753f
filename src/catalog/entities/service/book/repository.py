"""Book repository for data access operations."""

from collections.abc import Iterable

from sqlalchemy import delete as sa_delete
from sqlmodel import Session, col, func, select

from src.catalog.core.exceptions import NotFoundError
from src.catalog.entities.core._base import utc_now

from .entity import Book
from .table import BookTable


class BookRepository:
    """Data-access layer for books.

    Writes are staged on the session; committing is left to the caller so a
    request can batch several operations into one transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    @staticmethod
    def _to_row(book: Book) -> BookTable:
        return BookTable(
            id=book.id,
            title=book.title,
            isbn=book.isbn,
            page_count=book.page_count,
            authors=list(book.authors),
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, book_id: int) -> bool:
        return self._session.get(BookTable, book_id) is not None

    def existing_ids(self, ids: Iterable[int]) -> set[int]:
        """Return the subset of ``ids`` already present in the store."""
        wanted = list(ids)
        if not wanted:
            return set()
        statement = select(BookTable.id).where(col(BookTable.id).in_(wanted))
        return set(self._session.exec(statement).all())

    def count(self) -> int:
        statement = select(func.count()).select_from(BookTable)
        return self._session.exec(statement).one()

    def list_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable)).all()
        return [self._to_entity(row) for row in rows]

    def list_range(self, offset: int, limit: int) -> list[Book]:
        statement = select(BookTable).offset(offset).limit(limit)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def create(self, book: Book) -> Book:
        """Stage ``book`` for insert and return it with its assigned id."""
        now = utc_now()
        row = self._to_row(book)
        row.created_at = now
        row.updated_at = now
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def add_many(self, books: Iterable[Book]) -> None:
        """Stage a batch of inserts; timestamps are kept as given."""
        self._session.add_all([self._to_row(book) for book in books])

    def update(self, book: Book) -> Book:
        """Overwrite the editable fields of an existing book."""
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise NotFoundError(f"Book with ID {book.id} not found")

        row.title = book.title
        row.isbn = book.isbn
        row.page_count = book.page_count
        row.authors = list(book.authors)
        row.updated_at = utc_now()

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, book_id: int) -> bool:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

    def delete_all(self) -> int:
        """Delete every book and return how many rows were removed."""
        result = self._session.exec(sa_delete(BookTable))
        return result.rowcount
