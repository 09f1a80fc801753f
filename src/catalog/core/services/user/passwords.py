"""Salted password hashing backed by passlib."""

from passlib.context import CryptContext

from src.catalog.runtime.config.config_data import SecurityConfig


class PasswordHasher:
    """Hash and verify passwords; plaintext is never stored."""

    def __init__(self, config: SecurityConfig | None = None) -> None:
        config = config or SecurityConfig()
        self._context = CryptContext(schemes=config.password_schemes, deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, digest: str) -> bool:
        return self._context.verify(password, digest)
