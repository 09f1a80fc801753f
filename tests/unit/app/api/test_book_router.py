"""HTTP tests for the book endpoints."""

import pytest
from fastapi import status

from src.catalog.core.services.book.book_query import (
    KEYWORD_ERROR,
    NO_MATCH_ERROR,
    PAGE_ERROR,
)

BASE = "/api/book"


def _book_payload(book_id=None, **overrides):
    payload = {
        "title": "Domain-Driven Design",
        "isbn": "0321125215",
        "pageCount": 560,
        "authors": ["Eric Evans"],
    }
    if book_id is not None:
        payload["id"] = book_id
    payload.update(overrides)
    return payload


class TestSyncEndpoint:
    """GET /api/book imports the remote catalog."""

    def test_sync_returns_summaries(self, client, upstream_records, book_repository):
        response = client.get(BASE)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body) == len(upstream_records)
        first = next(item for item in body if item["id"] == 1)
        assert first == {
            "id": 1,
            "title": "Unlocking Android",
            "isbn": "1933988673",
            "pageCount": 416,
            "authors": "W. Frank Ableson, Charlie Collins, Robi Sen",
        }
        assert next(item for item in body if item["id"] == 8)["isbn"] == "Null"
        assert book_repository.count() == len(upstream_records)

    def test_sync_failure_is_a_server_error(
        self, session, upstream_client_factory, book_repository
    ):
        from fastapi.testclient import TestClient

        from src.catalog.api.http.app import app
        from src.catalog.api.http.deps import get_db_session, get_http_client

        def _session_override():
            yield session

        app.dependency_overrides[get_db_session] = _session_override
        app.dependency_overrides[get_http_client] = lambda: upstream_client_factory(
            status_code=502, raw=b"bad gateway"
        )
        try:
            response = TestClient(app).get(BASE)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "502" in response.json()["detail"]
        assert book_repository.count() == 0


class TestListEndpoints:
    """Listing, filtering and pagination endpoints."""

    def test_list_all_defaults_to_first_page(self, client, stored_books):
        response = client.get(f"{BASE}/all")

        assert response.status_code == status.HTTP_200_OK
        assert [book["id"] for book in response.json()] == [b.id for b in stored_books]

    def test_list_all_uses_page_size_alias(self, client, stored_books):
        response = client.get(f"{BASE}/all", params={"page": 2, "pageSize": 3})

        assert [book["id"] for book in response.json()] == [4, 5, 6]

    def test_list_all_returns_camel_case_books(self, client, stored_books):
        book = client.get(f"{BASE}/all", params={"pageSize": 1}).json()[0]

        assert set(book) == {
            "id", "title", "isbn", "pageCount", "authors", "createdAt", "updatedAt"
        }
        assert isinstance(book["authors"], list)

    def test_specific_condition_ands_criteria(self, client, stored_books):
        response = client.get(
            f"{BASE}/specific-condition",
            params={"author": "W. Frank Ableson", "title": "Second Edition"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert [book["id"] for book in response.json()] == [2]

    def test_specific_condition_without_criteria(self, client, stored_books):
        response = client.get(f"{BASE}/specific-condition")

        assert len(response.json()) == len(stored_books)

    def test_author_page(self, client, stored_books):
        response = client.get(f"{BASE}/author/Robi Sen", params={"page": 1, "pageSize": 1})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["page"] == 1
        assert body["pageSize"] == 1
        assert body["totalBooks"] == 2
        assert body["totalPages"] == 2
        assert len(body["books"]) == 1

    def test_title_page_is_paginated(self, client, stored_books):
        body = client.get(f"{BASE}/title/in Action", params={"pageSize": 2}).json()

        assert body["totalBooks"] == 5
        assert body["totalPages"] == 3
        assert len(body["books"]) == 2

    def test_isbn_page(self, client, stored_books):
        body = client.get(f"{BASE}/isbn/1935182").json()

        assert {book["id"] for book in body["books"]} == {2, 5}

    @pytest.mark.parametrize(
        "path",
        ["/author/Robi", "/title/Android", "/isbn/1933", "/search?keyword=Android&"],
    )
    @pytest.mark.parametrize("page", [0, -1])
    def test_paginated_endpoints_reject_bad_pages(self, client, stored_books, path, page):
        separator = "" if path.endswith("&") else "?"
        response = client.get(f"{BASE}{path}{separator}page={page}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": PAGE_ERROR}

    def test_search(self, client, stored_books):
        body = client.get(f"{BASE}/search", params={"keyword": "Satnam Alag"}).json()

        assert [book["id"] for book in body["books"]] == [6]
        assert body["totalBooks"] == 1

    def test_search_exact_isbn(self, client, stored_books):
        body = client.get(f"{BASE}/search", params={"keyword": "1933988312"}).json()

        assert [book["id"] for book in body["books"]] == [6]

    @pytest.mark.parametrize("params", [{}, {"keyword": ""}])
    def test_search_requires_keyword(self, client, stored_books, params):
        response = client.get(f"{BASE}/search", params=params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": KEYWORD_ERROR}

    def test_search_without_matches(self, client, stored_books):
        response = client.get(f"{BASE}/search", params={"keyword": "Kafka"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": NO_MATCH_ERROR}


class TestCrudEndpoints:
    """Create, read, update and delete."""

    def test_get_book(self, client, stored_books):
        response = client.get(f"{BASE}/3")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Specification by Example"

    def test_get_missing_book(self, client, stored_books):
        response = client.get(f"{BASE}/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_with_id(self, client, book_repository):
        response = client.post(BASE, json=_book_payload(100))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.headers["location"].endswith("/api/book/100")
        body = response.json()
        assert body["id"] == 100
        assert body["pageCount"] == 560
        assert body["createdAt"] is not None
        assert book_repository.get(100).title == "Domain-Driven Design"

    def test_create_without_id(self, client, book_repository):
        response = client.post(BASE, json=_book_payload())

        assert response.status_code == status.HTTP_201_CREATED
        new_id = response.json()["id"]
        assert new_id is not None
        assert response.headers["location"].endswith(f"/api/book/{new_id}")

    def test_create_null_payload(self, client):
        response = client.post(
            BASE, content="null", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Book is null."}

    def test_create_duplicate_leaves_store_unchanged(
        self, client, stored_books, book_repository
    ):
        before = book_repository.get(1)

        response = client.post(BASE, json=_book_payload(1))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {"detail": "A book with ID 1 already exists."}
        assert book_repository.get(1) == before
        assert book_repository.count() == len(stored_books)

    def test_update(self, client, stored_books, book_repository):
        response = client.put(
            f"{BASE}/3", json=_book_payload(3, title="Specification by Example, 2nd")
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT
        updated = book_repository.get(3)
        assert updated.title == "Specification by Example, 2nd"
        assert updated.authors == ["Eric Evans"]

    def test_update_with_mismatched_id(self, client, stored_books, book_repository):
        before = book_repository.get(3)

        response = client.put(f"{BASE}/3", json=_book_payload(4))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert book_repository.get(3) == before

    def test_update_missing_book(self, client, stored_books):
        response = client.put(f"{BASE}/999", json=_book_payload(999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, client, stored_books, book_repository):
        response = client.delete(f"{BASE}/2")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert book_repository.get(2) is None

    def test_delete_missing(self, client, stored_books):
        response = client.delete(f"{BASE}/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_all(self, client, stored_books, book_repository):
        response = client.delete(f"{BASE}/all")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert book_repository.count() == 0

    def test_delete_all_on_empty_store(self, client):
        response = client.delete(f"{BASE}/all")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_responses_carry_request_id(self, client, stored_books):
        response = client.get(f"{BASE}/1", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"


class TestIntegerBounds:
    """Integers outside the stored 64-bit range are rejected before the store."""

    TOO_BIG = 10**20

    @pytest.mark.parametrize("method", ["get", "delete"])
    def test_oversized_path_id(self, client, stored_books, method):
        response = getattr(client, method)(f"{BASE}/{self.TOO_BIG}")

        assert response.status_code == 422

    def test_oversized_path_id_on_update(self, client, stored_books):
        response = client.put(f"{BASE}/{self.TOO_BIG}", json=_book_payload(1))

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "params", [{"page": 10**19}, {"pageSize": 10**19}, {"page": 1, "pageSize": TOO_BIG}]
    )
    def test_oversized_page_arguments(self, client, stored_books, params):
        response = client.get(f"{BASE}/all", params=params)

        assert response.status_code == 422

    def test_oversized_page_on_filtered_listing(self, client, stored_books):
        response = client.get(f"{BASE}/author/Robi Sen", params={"page": 10**19})

        assert response.status_code == 422

    def test_offset_beyond_the_store_range_is_an_empty_listing(self, client, stored_books):
        response = client.get(f"{BASE}/all", params={"page": 2**62, "pageSize": 10})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_largest_stored_id_is_accepted(self, client, stored_books):
        response = client.get(f"{BASE}/{2**63 - 1}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize("field", ["id", "pageCount"])
    def test_oversized_body_integers_on_create(self, client, book_repository, field):
        payload = _book_payload(100)
        payload[field] = self.TOO_BIG

        response = client.post(BASE, json=payload)

        assert response.status_code == 422
        assert book_repository.count() == 0
