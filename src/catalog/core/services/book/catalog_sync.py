"""Import of the remote catalog into the local store."""

import httpx
from loguru import logger
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from src.catalog.core.exceptions import MalformedUpstreamPayload, UpstreamUnavailable
from src.catalog.entities.core._base import utc_now
from src.catalog.entities.service.book import (
    ISBN_SENTINEL,
    Book,
    BookRepository,
    BookSummary,
    UpstreamBook,
)
from src.catalog.runtime.config.config_data import CatalogSourceConfig

_upstream_list = TypeAdapter(list[UpstreamBook])


class CatalogSyncService:
    """Fetch the upstream book list and insert the records we do not have yet.

    Existing rows are never updated. Two syncs running at the same time can
    both decide an id is missing; the primary key rejects the second insert
    and that request fails.
    """

    def __init__(
        self,
        repository: BookRepository,
        session: Session,
        client: httpx.Client,
        source: CatalogSourceConfig,
    ) -> None:
        self._repository = repository
        self._session = session
        self._client = client
        self._source = source
        self._log = logger.bind(catalog_source=source.url)

    def fetch(self) -> list[Book]:
        """GET the upstream list and normalise every record."""
        try:
            response = self._client.get(
                self._source.url,
                timeout=self._source.timeout_seconds,
                headers={
                    "Accept": "application/json",
                    "User-Agent": self._source.user_agent,
                },
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._log.bind(error_type="HTTPStatusError").error(
                "Upstream catalog returned status {}", exc.response.status_code
            )
            raise UpstreamUnavailable(
                f"Upstream catalog returned status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            self._log.bind(error_type=type(exc).__name__).error(
                "Error fetching upstream catalog: {}", exc
            )
            raise UpstreamUnavailable(f"Upstream catalog unreachable: {exc}") from exc

        try:
            records = _upstream_list.validate_json(response.content)
        except PydanticValidationError as exc:
            self._log.bind(error_type="MalformedUpstreamPayload").error(
                "Upstream catalog payload rejected: {} error(s)", exc.error_count()
            )
            raise MalformedUpstreamPayload(
                f"Upstream catalog payload is not a book list: {exc.error_count()} error(s)"
            ) from exc

        now = utc_now()
        books = []
        for record in records:
            book = record.to_book()
            book.created_at = now
            book.updated_at = now
            if not book.isbn:
                book.isbn = ISBN_SENTINEL
            books.append(book)
        return books

    def fetch_and_merge_catalog(self) -> list[BookSummary]:
        """Insert unseen upstream books in one batch and summarise the whole fetch.

        The summary covers every fetched record, including the ones skipped
        because their id was already stored.
        """
        books = self.fetch()

        known = self._repository.existing_ids(book.id for book in books)
        new_books = []
        for book in books:
            if book.id in known:
                continue
            known.add(book.id)
            new_books.append(book)

        if new_books:
            self._repository.add_many(new_books)
            self._session.commit()

        self._log.info(
            "Catalog sync fetched {} book(s), inserted {}, skipped {}",
            len(books),
            len(new_books),
            len(books) - len(new_books),
        )
        return [BookSummary.from_book(book) for book in books]
