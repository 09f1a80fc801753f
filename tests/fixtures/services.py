from __future__ import annotations

import json
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.catalog.core.services import PasswordHasher


@pytest.fixture
def upstream_records() -> list[dict[str, Any]]:
    """Records in the shape the remote catalog publishes."""
    return [
        {
            "id": 1,
            "title": "Unlocking Android",
            "isbn": "1933988673",
            "pageCount": 416,
            "authors": ["W. Frank Ableson", "Charlie Collins", "Robi Sen"],
        },
        {
            "id": 2,
            "title": "Android in Action, Second Edition",
            "isbn": "1935182722",
            "pageCount": 592,
            "authors": ["W. Frank Ableson", "Robi Sen"],
        },
        {
            "id": 8,
            "title": "Griffon in Action",
            "isbn": None,
            "pageCount": 375,
            "authors": ["Andres Almiray", "Danno Ferrin", "James Shingler"],
        },
    ]


@pytest.fixture
def upstream_client_factory() -> Callable[..., httpx.Client]:
    """Build an httpx client whose transport answers like the remote catalog."""

    def _factory(
        payload: Any = None,
        status_code: int = 200,
        raw: bytes | None = None,
        error: Exception | None = None,
        calls: list[httpx.Request] | None = None,
    ) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            if calls is not None:
                calls.append(request)
            if error is not None:
                raise error
            content = raw if raw is not None else json.dumps(payload).encode("utf-8")
            return httpx.Response(
                status_code,
                content=content,
                headers={"Content-Type": "application/json"},
            )

        return httpx.Client(transport=httpx.MockTransport(handler))

    return _factory


@pytest.fixture
def upstream_client(upstream_client_factory, upstream_records) -> httpx.Client:
    return upstream_client_factory(upstream_records)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher()


@pytest.fixture
def client(
    session: Session,
    upstream_client: httpx.Client,
    password_hasher: PasswordHasher,
) -> Generator[TestClient]:
    """Test client wired to the in-memory session and the fake upstream."""
    from src.catalog.api.http.app import app
    from src.catalog.api.http.deps import (
        get_db_session,
        get_http_client,
        get_password_hasher,
    )

    def _session_override():
        yield session

    app.dependency_overrides[get_db_session] = _session_override
    app.dependency_overrides[get_http_client] = lambda: upstream_client
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        upstream_client.close()
