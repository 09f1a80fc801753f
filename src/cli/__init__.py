"""Main CLI application module."""

import typer

from .catalog_commands import catalog_app
from .db_commands import db_app
from .utils import console

app = typer.Typer(
    help="📚 Book Catalog CLI - database and catalog maintenance",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(catalog_app, name="catalog")


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host to bind the server to"),
    port: int = typer.Option(8000, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """🚀 Run the API server with uvicorn."""
    import uvicorn

    console.print(f"[bold green]Starting Book Catalog API on {host}:{port}[/bold green]")
    uvicorn.run(
        "src.catalog.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
