#!/usr/bin/env python3
"""Command-line interface for the book catalog."""

import typer
from rich.panel import Panel

from src.catalog.core.services import DbSessionService
from src.catalog.runtime.context import get_config

from .book_commands import books_app
from .utils import console

app = typer.Typer(
    name="book-catalog",
    help="Book Catalog CLI - manage books and run the API server",
    rich_markup_mode="rich",
)

app.add_typer(books_app, name="books")


@app.command("init-db")
def init_db() -> None:
    """
    🗄️ Create the catalog tables.
    """
    database_service = DbSessionService()
    try:
        database_service.create_all()
    finally:
        database_service.dispose()
    console.print(f"[green]✅ Database ready at {get_config().database.url}[/green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (defaults to config)"),
    port: int | None = typer.Option(None, help="Port (defaults to config)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """
    🚀 Run the HTTP API with uvicorn.
    """
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit(
            f"[bold green]Serving Book Catalog API on http://{host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run("src.catalog.api.http.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
