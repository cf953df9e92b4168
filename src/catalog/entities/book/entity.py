"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, Field


class Book(BaseModel):
    """Book entity representing a catalog record.

    ``id`` is ``None`` until the record has been persisted; the storage layer
    assigns it on first insert and it never changes afterwards.
    """

    id: int | None = Field(default=None, description="Storage-assigned identifier")
    title: str = Field(description="Title")
    author: str = Field(description="Author")

    def __eq__(self, other: Any) -> bool:
        """Compare books by all three fields."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.author))

    def __str__(self) -> str:
        return f"Book{{id={self.id}, title='{self.title}', author='{self.author}'}}"
