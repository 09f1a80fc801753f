"""User repository for data access operations."""

from sqlmodel import Session

from src.catalog.entities.core._base import utc_now

from .entity import User
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def create(self, user: User) -> User:
        """Stage ``user`` for insert and return it with its assigned id."""
        now = utc_now()
        row = UserTable(password_hash=user.password_hash, created_at=now, updated_at=now)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)
