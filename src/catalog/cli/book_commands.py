"""Book catalog CLI commands."""

from enum import Enum

import typer
from rich.panel import Panel

from src.catalog.entities.book.entity import Book

from .utils import books_table, catalog_service, console

books_app = typer.Typer(help="📚 Book catalog commands")


class SearchField(str, Enum):
    keyword = "keyword"
    title = "title"
    author = "author"


def _require_text(value: str, name: str) -> str:
    value = value.strip()
    if not value:
        console.print(f"[red]❌ {name} must not be blank[/red]")
        raise typer.Exit(2)
    return value


@books_app.command("add")
def add_book(
    title: str = typer.Argument(..., help="Title of the book"),
    author: str = typer.Argument(..., help="Author of the book"),
) -> None:
    """
    ➕ Add a book to the catalog.
    """
    book = Book(title=_require_text(title, "Title"), author=_require_text(author, "Author"))

    with catalog_service() as service:
        saved = service.add_book(book)

    console.print(f"[green]✅ Added book {saved.id}: {saved.title} by {saved.author}[/green]")


@books_app.command("list")
def list_books() -> None:
    """
    📋 List every book in the catalog.
    """
    with catalog_service() as service:
        books = service.get_all_books()

    if not books:
        console.print("[yellow]The catalog is empty[/yellow]")
        return

    console.print(books_table(books))
    console.print(f"\n[dim]Showing {len(books)} books[/dim]")


@books_app.command("get")
def get_book(book_id: int = typer.Argument(..., help="Book ID")) -> None:
    """
    🔎 Show one book.
    """
    with catalog_service() as service:
        book = service.get_book_by_id(book_id)

    if book is None:
        console.print(f"[red]❌ Book {book_id} not found[/red]")
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold cyan]{book.title}[/bold cyan]\n[green]{book.author}[/green]",
            title=f"Book {book.id}",
            border_style="cyan",
        )
    )


@books_app.command("search")
def search_books(
    fragment: str = typer.Argument(..., help="Text to look for, case-insensitive"),
    field: SearchField = typer.Option(
        SearchField.keyword, "--field", "-f", help="Match title, author, or either"
    ),
) -> None:
    """
    🔍 Search books by title, author, or both.
    """
    with catalog_service() as service:
        if field is SearchField.title:
            books = service.search_books_by_title(fragment)
        elif field is SearchField.author:
            books = service.search_books_by_author(fragment)
        else:
            books = service.search_books(fragment)

    if not books:
        console.print(f"[yellow]No books match '{fragment}'[/yellow]")
        return

    console.print(books_table(books))


@books_app.command("update")
def update_book(
    book_id: int = typer.Argument(..., help="Book ID"),
    title: str = typer.Argument(..., help="New title"),
    author: str = typer.Argument(..., help="New author"),
) -> None:
    """
    ✏️ Replace the title and author of a book.
    """
    details = Book(title=_require_text(title, "Title"), author=_require_text(author, "Author"))

    with catalog_service() as service:
        updated = service.update_book(book_id, details)

    if updated is None:
        console.print(f"[red]❌ Book {book_id} not found[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Updated book {updated.id}: {updated.title} by {updated.author}[/green]")


@books_app.command("delete")
def delete_book(book_id: int = typer.Argument(..., help="Book ID")) -> None:
    """
    🗑️ Delete a book.
    """
    with catalog_service() as service:
        deleted = service.delete_book(book_id)

    if not deleted:
        console.print(f"[red]❌ Book {book_id} not found[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✅ Deleted book {book_id}[/green]")
