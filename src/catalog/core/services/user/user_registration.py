from loguru import logger
from sqlmodel import Session

from src.catalog.core.exceptions import InternalError
from src.catalog.core.services.user.passwords import PasswordHasher
from src.catalog.entities.core.user import User, UserRegistration, UserRepository


class UserRegistrationService:
    def __init__(
        self,
        repository: UserRepository,
        db_session: Session,
        password_hasher: PasswordHasher,
    ):
        self._repository = repository
        self._db_session = db_session
        self._password_hasher = password_hasher

    def register(self, registration: UserRegistration) -> User:
        """Hash the password, stamp timestamps and persist the user.

        Raises:
            InternalError: any failure along the way, carrying its message
        """
        try:
            digest = self._password_hasher.hash(registration.password)
            created_user = self._repository.create(User(password_hash=digest))
            self._db_session.commit()
        except Exception as e:
            logger.error(f"Error during user registration: {e}")
            self._db_session.rollback()
            raise InternalError(str(e)) from e

        logger.info("Registered user {}", created_user.id)
        return created_user
