"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and API payload schemas
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import User, UserRegistration, UserRepository, UserTable
from .service.book import (
    Book,
    BookPage,
    BookRepository,
    BookSummary,
    BookTable,
)

__all__ = [
    "Book",
    "BookPage",
    "BookRepository",
    "BookSummary",
    "BookTable",
    "User",
    "UserRegistration",
    "UserRepository",
    "UserTable",
]
