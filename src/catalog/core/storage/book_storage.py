"""Book storage interface and implementations.

Provides the storage contract the catalog service depends on, plus an
in-memory backend. The SQL backend lives beside the Book entity in
``src.catalog.entities.book.repository``.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from src.catalog.entities.book.entity import Book


def contains_ignore_case(value: str, fragment: str) -> bool:
    """Return True if ``fragment`` occurs anywhere in ``value``, ignoring case.

    Both sides are Unicode case-folded, so "STRASSE" matches "straße".
    """
    return fragment.casefold() in value.casefold()


class BookStorage(ABC):
    """Abstract interface for book storage backends.

    Every operation is atomic on its own. Query results are ordered by
    ascending id.
    """

    @abstractmethod
    def save(self, book: Book) -> Book:
        """Insert or replace a book.

        Args:
            book: Book to store. When ``book.id`` is None a new id is assigned.

        Returns:
            A new Book value carrying the stored state, including its id.
        """
        pass

    @abstractmethod
    def find_by_id(self, book_id: int) -> Book | None:
        """Retrieve a book.

        Returns:
            The book or None if no record has that id
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return every stored book."""
        pass

    @abstractmethod
    def exists_by_id(self, book_id: int) -> bool:
        """Check whether a record with ``book_id`` exists."""
        pass

    @abstractmethod
    def delete_by_id(self, book_id: int) -> None:
        """Delete a book. Deleting a missing id is a no-op."""
        pass

    @abstractmethod
    def find_by_title_containing(self, fragment: str) -> list[Book]:
        """Books whose title contains ``fragment``, case-insensitive."""
        pass

    @abstractmethod
    def find_by_author_containing(self, fragment: str) -> list[Book]:
        """Books whose author contains ``fragment``, case-insensitive."""
        pass

    @abstractmethod
    def find_by_title_or_author_containing(self, fragment: str) -> list[Book]:
        """Books whose title or author contains ``fragment``, case-insensitive."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if storage backend is available.

        Returns:
            True if storage is healthy and available
        """
        pass


class InMemoryBookStorage(BookStorage):
    """Dict-backed book storage."""

    def __init__(self):
        self._data: dict[int, Book] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def save(self, book: Book) -> Book:
        with self._lock:
            if book.id is None:
                self._last_id += 1
                book_id = self._last_id
            else:
                book_id = book.id
                self._last_id = max(self._last_id, book_id)

            stored = Book(id=book_id, title=book.title, author=book.author)
            self._data[book_id] = stored
            return stored.model_copy()

    def find_by_id(self, book_id: int) -> Book | None:
        with self._lock:
            book = self._data.get(book_id)
            return book.model_copy() if book is not None else None

    def find_all(self) -> list[Book]:
        return self._select(lambda book: True)

    def exists_by_id(self, book_id: int) -> bool:
        with self._lock:
            return book_id in self._data

    def delete_by_id(self, book_id: int) -> None:
        with self._lock:
            self._data.pop(book_id, None)

    def find_by_title_containing(self, fragment: str) -> list[Book]:
        return self._select(lambda book: contains_ignore_case(book.title, fragment))

    def find_by_author_containing(self, fragment: str) -> list[Book]:
        return self._select(lambda book: contains_ignore_case(book.author, fragment))

    def find_by_title_or_author_containing(self, fragment: str) -> list[Book]:
        return self._select(
            lambda book: contains_ignore_case(book.title, fragment)
            or contains_ignore_case(book.author, fragment)
        )

    def is_available(self) -> bool:
        return True

    def clear(self) -> None:
        """Drop every record. The id counter is kept so ids are never reused."""
        with self._lock:
            self._data.clear()

    def _select(self, predicate) -> list[Book]:
        with self._lock:
            return [
                self._data[book_id].model_copy()
                for book_id in sorted(self._data)
                if predicate(self._data[book_id])
            ]
