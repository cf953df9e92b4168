"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.table import Table

from src.catalog.core.services import CatalogService, DbSessionService
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.repository import BookRepository

# Initialize Rich console for colored output
console = Console()


@contextmanager
def catalog_service() -> Iterator[CatalogService]:
    """Yield a catalog service bound to a database session for one command."""
    database_service = DbSessionService()
    try:
        database_service.create_all()
        with database_service.session_scope() as session:
            yield CatalogService(BookRepository(session))
    finally:
        database_service.dispose()


def books_table(books: list[Book]) -> Table:
    """Render books as a rich table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="yellow", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Author", style="green")

    for book in books:
        table.add_row(str(book.id), book.title, book.author)

    return table
