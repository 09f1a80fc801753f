from .book_query import BookQueryService
from .catalog_sync import CatalogSyncService

__all__ = ["BookQueryService", "CatalogSyncService"]
