"""Catalog CLI commands."""

import httpx
import typer
from rich.table import Table

from src.catalog.core.exceptions import UpstreamError
from src.catalog.core.services import CatalogSyncService
from src.catalog.entities.service.book import BookRepository
from src.catalog.runtime.context import get_config

from .utils import console, database_service

catalog_app = typer.Typer(help="📚 Catalog commands")


@catalog_app.command("sync")
def sync(
    limit: int = typer.Option(20, "--limit", "-l", help="Maximum number of rows to show"),
) -> None:
    """Import the upstream catalog and show what was fetched."""
    source = get_config().catalog_source

    with database_service() as service, service.session_scope() as session:
        repository = BookRepository(session)
        before = repository.count()
        with httpx.Client(follow_redirects=True) as client:
            sync_service = CatalogSyncService(repository, session, client, source)
            try:
                summaries = sync_service.fetch_and_merge_catalog()
            except UpstreamError as e:
                console.print(f"[red]❌ Sync failed: {e.message}[/red]")
                raise typer.Exit(code=1) from e
        after = repository.count()

    table = Table(title=f"Fetched from {source.url}")
    table.add_column("ID", style="cyan")
    table.add_column("Title", style="green")
    table.add_column("ISBN", style="blue")
    table.add_column("Pages", style="magenta")
    table.add_column("Authors", style="yellow")

    for summary in summaries[:limit]:
        table.add_row(
            str(summary.id),
            summary.title,
            summary.isbn,
            str(summary.page_count),
            summary.authors,
        )

    console.print(table)
    console.print(
        f"\n[green]Fetched {len(summaries)} book(s), inserted {after - before}[/green]"
    )


@catalog_app.command("count")
def count() -> None:
    """Print the number of stored books."""
    with database_service() as service, service.session_scope() as session:
        total = BookRepository(session).count()

    console.print(f"[green]{total} book(s) in the catalog[/green]")
