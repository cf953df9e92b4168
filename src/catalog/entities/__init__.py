"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .book import Book, BookTable

__all__ = ["Book", "BookTable"]
