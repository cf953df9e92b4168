"""Book repository backed by a SQL database."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from src.catalog.core.storage.book_storage import BookStorage
from src.catalog.entities.book.entity import Book
from src.catalog.entities.book.table import BookTable


class BookRepository(BookStorage):
    """Data-access layer for books.

    Each write commits immediately, so every call is its own transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, book: Book) -> Book:
        row = None
        if book.id is not None:
            row = self._session.get(BookTable, book.id)

        if row is None:
            row = BookTable(id=book.id, title=book.title, author=book.author)
        else:
            row.title = book.title
            row.author = book.author

        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        return Book.model_validate(row, from_attributes=True)

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def find_all(self) -> list[Book]:
        return self._fetch(select(BookTable))

    def exists_by_id(self, book_id: int) -> bool:
        statement = select(BookTable.id).where(BookTable.id == book_id)
        return self._session.exec(statement).first() is not None

    def delete_by_id(self, book_id: int) -> None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()

    def find_by_title_containing(self, fragment: str) -> list[Book]:
        statement = select(BookTable).where(
            col(BookTable.title).icontains(fragment, autoescape=True)
        )
        return self._fetch(statement)

    def find_by_author_containing(self, fragment: str) -> list[Book]:
        statement = select(BookTable).where(
            col(BookTable.author).icontains(fragment, autoescape=True)
        )
        return self._fetch(statement)

    def find_by_title_or_author_containing(self, fragment: str) -> list[Book]:
        statement = select(BookTable).where(
            col(BookTable.title).icontains(fragment, autoescape=True)
            | col(BookTable.author).icontains(fragment, autoescape=True)
        )
        return self._fetch(statement)

    def is_available(self) -> bool:
        try:
            self._session.connection().execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            return False

    def _fetch(self, statement) -> list[Book]:
        rows = self._session.exec(statement.order_by(col(BookTable.id))).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]
