"""Entity package: Book."""

from .entity import Book
from .repository import BookRepository
from .schemas import ISBN_SENTINEL, BookPage, BookSummary, UpstreamBook
from .table import BookTable

__all__ = [
    "ISBN_SENTINEL",
    "Book",
    "BookPage",
    "BookRepository",
    "BookSummary",
    "BookTable",
    "UpstreamBook",
]
