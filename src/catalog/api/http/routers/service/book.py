"""Book API router: sync, listings, search and CRUD."""

from fastapi import APIRouter, Body, Depends, Path, Query, Request, Response, status
from loguru import logger
from sqlmodel import Session

from src.catalog.api.http.deps import (
    get_book_query_service,
    get_book_repository,
    get_catalog_sync_service,
    get_db_session,
)
from src.catalog.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.catalog.core.services import BookQueryService, CatalogSyncService
from src.catalog.entities.core._base import MAX_STORED_INT, MIN_STORED_INT
from src.catalog.entities.service.book import (
    Book,
    BookPage,
    BookRepository,
    BookSummary,
)

router = APIRouter()

PageQuery = Query(default=1, le=MAX_STORED_INT, description="1-based page number")
PageSizeQuery = Query(
    default=10, alias="pageSize", le=MAX_STORED_INT, description="Items per page"
)
BookIdPath = Path(ge=MIN_STORED_INT, le=MAX_STORED_INT, description="Book identifier")


@router.get("", response_model=list[BookSummary])
def sync_books(
    sync_service: CatalogSyncService = Depends(get_catalog_sync_service),
) -> list[BookSummary]:
    """Import the upstream catalog and return a summary of every fetched book."""
    return sync_service.fetch_and_merge_catalog()


@router.get("/all", response_model=list[Book])
def list_books(
    page: int = PageQuery,
    page_size: int = PageSizeQuery,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> list[Book]:
    """Offset listing without filters or totals."""
    return query_service.list_range(page, page_size)


@router.get("/specific-condition", response_model=list[Book])
def list_books_by_condition(
    author: str | None = None,
    title: str | None = None,
    isbn: str | None = None,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> list[Book]:
    """Every book matching all of the supplied criteria, unpaginated."""
    return query_service.find_by_conditions(author=author, title=title, isbn=isbn)


@router.get("/author/{author}", response_model=BookPage)
def list_books_by_author(
    author: str,
    page: int = PageQuery,
    page_size: int = PageSizeQuery,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> BookPage:
    return query_service.by_author(author, page, page_size)


@router.get("/title/{title}", response_model=BookPage)
def list_books_by_title(
    title: str,
    page: int = PageQuery,
    page_size: int = PageSizeQuery,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> BookPage:
    return query_service.by_title(title, page, page_size)


@router.get("/isbn/{isbn}", response_model=BookPage)
def list_books_by_isbn(
    isbn: str,
    page: int = PageQuery,
    page_size: int = PageSizeQuery,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> BookPage:
    return query_service.by_isbn(isbn, page, page_size)


@router.get("/search", response_model=BookPage)
def search_books(
    keyword: str | None = None,
    page: int = PageQuery,
    page_size: int = PageSizeQuery,
    query_service: BookQueryService = Depends(get_book_query_service),
) -> BookPage:
    """Keyword search across title, authors and exact ISBN."""
    return query_service.search(keyword, page, page_size)


@router.delete("/all", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_books(
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete every book."""
    if repository.count() == 0:
        raise NotFoundError("No books to delete")

    deleted = repository.delete_all()
    session.commit()
    logger.info("Deleted all {} book(s)", deleted)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: int = BookIdPath,
    repository: BookRepository = Depends(get_book_repository),
) -> Book:
    """Get a book by ID."""
    book = repository.get(book_id)
    if book is None:
        raise NotFoundError("Book not found")
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    request: Request,
    response: Response,
    book: Book | None = Body(default=None),
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Book:
    """Create a new book; the id may be supplied or left to the store."""
    if book is None:
        raise ValidationError("Book is null.")

    if book.id is not None and repository.exists(book.id):
        logger.warning("Rejected duplicate book id {}", book.id)
        raise ConflictError(f"A book with ID {book.id} already exists.")

    created_book = repository.create(book)
    session.commit()

    response.headers["Location"] = str(request.url_for("get_book", book_id=created_book.id))
    return created_book


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(
    book_update: Book,
    book_id: int = BookIdPath,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Response:
    """Overwrite title, ISBN, page count and authors of a book."""
    if book_update.id != book_id:
        raise ValidationError("Book id in the path does not match the payload.")

    repository.update(book_update)
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: int = BookIdPath,
    repository: BookRepository = Depends(get_book_repository),
    session: Session = Depends(get_db_session),
) -> Response:
    """Delete a book."""
    if not repository.delete(book_id):
        raise NotFoundError("Book not found")
    session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
