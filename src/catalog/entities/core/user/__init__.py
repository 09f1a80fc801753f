"""User entity module.

- User: Domain entity; never carries a plaintext password
- UserRegistration: Register request payload
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import User, UserRegistration
from .repository import UserRepository
from .table import UserTable

__all__ = ["User", "UserRegistration", "UserTable", "UserRepository"]
