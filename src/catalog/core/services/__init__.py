from .book import BookQueryService, CatalogSyncService
from .database import DbSessionService
from .user import PasswordHasher, UserRegistrationService

__all__ = [
    "BookQueryService",
    "CatalogSyncService",
    "DbSessionService",
    "PasswordHasher",
    "UserRegistrationService",
]
