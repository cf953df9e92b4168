from loguru import logger

from src.catalog.core.storage.book_storage import BookStorage
from src.catalog.entities.book.entity import Book


class CatalogService:
    """Business operations over the book catalog.

    The service holds no state of its own beyond the storage it was built with.
    Lookups that miss resolve to ``None`` (or ``False`` for deletes) rather than
    raising; anything the storage raises propagates unchanged.
    """

    def __init__(self, storage: BookStorage):
        self._storage = storage

    @property
    def storage(self) -> BookStorage:
        return self._storage

    def add_book(self, book: Book) -> Book:
        """Persist a new book and return it with its assigned id."""
        saved = self._storage.save(book)
        logger.info("Added book {} ({!r} by {!r})", saved.id, saved.title, saved.author)
        return saved

    def get_all_books(self) -> list[Book]:
        return self._storage.find_all()

    def get_book_by_id(self, book_id: int) -> Book | None:
        book = self._storage.find_by_id(book_id)
        if book is None:
            logger.debug("Book {} not found", book_id)
        return book

    def search_books(self, keyword: str) -> list[Book]:
        """Books whose title or author contains ``keyword``, ignoring case."""
        return self._storage.find_by_title_or_author_containing(keyword)

    def search_books_by_title(self, title: str) -> list[Book]:
        return self._storage.find_by_title_containing(title)

    def search_books_by_author(self, author: str) -> list[Book]:
        return self._storage.find_by_author_containing(author)

    def update_book(self, book_id: int, details: Book | None) -> Book | None:
        """Replace the title and author of an existing book.

        Both fields are overwritten with the values from ``details``; its id is
        ignored.

        Args:
            book_id: Identifier of the book to update
            details: Book carrying the new title and author

        Returns:
            The updated book, or None if no book has ``book_id``

        Raises:
            ValueError: If ``details`` is None
        """
        if details is None:
            raise ValueError("Book details cannot be null")

        book = self._storage.find_by_id(book_id)
        if book is None:
            logger.debug("Book {} not found; nothing to update", book_id)
            return None

        book.title = details.title
        book.author = details.author
        updated = self._storage.save(book)
        logger.info("Updated book {}", updated.id)
        return updated

    def delete_book(self, book_id: int) -> bool:
        """Delete a book.

        Returns:
            True if the book existed and was removed, False otherwise
        """
        if not self._storage.exists_by_id(book_id):
            logger.debug("Book {} not found; nothing to delete", book_id)
            return False

        self._storage.delete_by_id(book_id)
        logger.info("Deleted book {}", book_id)
        return True
