"""Request and response models for the book endpoints.

Validation lives here: blank or missing titles and authors are rejected
before a request reaches the catalog service.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.catalog.entities.book.entity import Book


class BookPayload(BaseModel):
    """Fields a client may supply for a book. Any ``id`` in the body is ignored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1, description="Title is required")
    author: str = Field(min_length=1, description="Author is required")

    def to_entity(self) -> Book:
        return Book(title=self.title, author=self.author)


class BookCreate(BookPayload):
    """Body of ``POST /api/books``."""


class BookUpdate(BookPayload):
    """Body of ``PUT /api/books/{id}``."""


class BookRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
