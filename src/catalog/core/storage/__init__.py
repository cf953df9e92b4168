from .book_storage import BookStorage, InMemoryBookStorage

__all__ = ["BookStorage", "InMemoryBookStorage"]
