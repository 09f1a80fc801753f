"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from src.catalog.core.services import DbSessionService

console = Console()


@contextmanager
def database_service() -> Iterator[DbSessionService]:
    """Yield a database service for one command, disposing the engine after."""
    try:
        service = DbSessionService()
    except ValueError as e:
        console.print(f"[red]❌ Invalid database configuration: {e}[/red]")
        raise typer.Exit(code=1) from e
    try:
        yield service
    finally:
        service.dispose()
