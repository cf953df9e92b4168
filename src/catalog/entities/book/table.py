"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "books"
    # Keep SQLite from handing out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    author: str = Field(index=True)
