"""Entity package: Book.

- Book: domain entity
- BookTable: database persistence model

The SQL repository lives in ``.repository`` and is imported from there, since it
depends on the storage contract in ``src.catalog.core.storage``.
"""

from .entity import Book
from .table import BookTable

__all__ = ["Book", "BookTable"]
