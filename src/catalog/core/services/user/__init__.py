from .passwords import PasswordHasher
from .user_registration import UserRegistrationService

__all__ = ["PasswordHasher", "UserRegistrationService"]
