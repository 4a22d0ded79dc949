"""
Book Model

The book table of the Library API. Books stand alone: there are no
relationships to authors or users, the author is stored as plain text.
"""

import uuid

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


def generate_id() -> str:
    """Server-generated opaque identifier (UUID4 as text)."""
    return str(uuid.uuid4())


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - id: UUID string, generated on insert
    - title: Book title (required)
    - author: Author name (required)
    - published_year: Year of publication (exposed as ``publishedYear``)

    Example:
        book = Book(title="1984", author="George Orwell", published_year=1949)
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    # String(36) rather than the UUID type so SQLite and PostgreSQL
    # store the same representation
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    published_year: Mapped[int] = mapped_column(
        "publishedYear",
        Integer,
        nullable=False,
        comment="Year the book was published"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
