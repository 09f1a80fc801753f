from dataclasses import dataclass

import httpx

from src.catalog.core.services import DbSessionService, PasswordHasher


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    http_client: httpx.Client
    password_hasher: PasswordHasher
