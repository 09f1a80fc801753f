"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import (
    BookQueryService,
    CatalogSyncService,
    PasswordHasher,
    UserRegistrationService,
)
from src.catalog.entities.core.user import UserRepository
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.context import get_config


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_http_client(request: Request) -> httpx.Client:
    """Get the shared outbound HTTP client."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.http_client


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the password hasher instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.password_hasher


def get_book_repository(db: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(db)


def get_user_repository(db: Session = Depends(get_db_session)) -> UserRepository:
    return UserRepository(db)


def get_book_query_service(
    repository: BookRepository = Depends(get_book_repository),
) -> BookQueryService:
    return BookQueryService(repository)


def get_catalog_sync_service(
    repository: BookRepository = Depends(get_book_repository),
    db: Session = Depends(get_db_session),
    client: httpx.Client = Depends(get_http_client),
) -> CatalogSyncService:
    return CatalogSyncService(repository, db, client, get_config().catalog_source)


def get_user_registration_service(
    repository: UserRepository = Depends(get_user_repository),
    db: Session = Depends(get_db_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserRegistrationService:
    return UserRegistrationService(repository, db, password_hasher)
