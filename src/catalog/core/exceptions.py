"""Error taxonomy shared by services and the HTTP layer.

Each error carries the HTTP status it is rendered with. Nothing is retried;
every error ends the current request.
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for failures reported to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Bad pagination arguments, missing payloads or mismatched ids."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    """Missing record, empty collection or empty search result."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    """A record with the same identity already exists."""

    status_code = status.HTTP_409_CONFLICT


class UpstreamError(CatalogError):
    """The remote catalog could not be synchronised."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class UpstreamUnavailable(UpstreamError):
    """Transport failure or non-2xx response from the remote catalog."""


class MalformedUpstreamPayload(UpstreamError):
    """The remote catalog answered with something that is not a book list."""


class InternalError(CatalogError):
    """Unexpected failure whose message is surfaced to the caller."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
