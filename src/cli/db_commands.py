"""Database CLI commands."""

import typer
from sqlalchemy.exc import SQLAlchemyError

from .utils import console, database_service

db_app = typer.Typer(help="🗄️  Database commands")


@db_app.command("init")
def init() -> None:
    """Create the books and users tables if they do not exist."""
    with database_service() as service:
        try:
            service.create_all()
        except SQLAlchemyError as e:
            console.print(f"[red]❌ Failed to create tables: {e}[/red]")
            raise typer.Exit(code=1) from e

    console.print("[green]✅ Database tables are ready[/green]")


@db_app.command("check")
def check() -> None:
    """Verify that the configured database is reachable."""
    with database_service() as service:
        if not service.health_check():
            console.print("[red]❌ Database is unreachable[/red]")
            raise typer.Exit(code=1)

    console.print("[green]✅ Database connection OK[/green]")
