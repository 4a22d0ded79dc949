"""
Book Service

Business logic for books: existence checks around every read, update and
delete, with the database work delegated to BookRepository.

Update sequence:
    find(id) ──absent──▶ NotFoundError "Book with ID {id} not found"
        │
    update(id, changed fields)
        │
    find(id) ──absent──▶ NotFoundError "Book with ID {id} not found after update"
        │
    fresh Book

The three steps are separate statements. A delete that lands between the
UPDATE and the re-fetch surfaces as the "after update" error.
"""

import logging

from library_api.exceptions import NotFoundError
from library_api.models import Book
from library_api.repositories import BookRepository
from library_api.schemas.book import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """CRUD operations for books."""

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    def create(self, data: BookCreate) -> Book:
        """Insert a new book and return it with its generated id."""
        book = self.repository.save(Book(**data.model_dump()))
        logger.info(f"Created book {book.id}")
        return book

    def find_all(self) -> list[Book]:
        return self.repository.find()

    def find_one(self, book_id: str) -> Book:
        """
        Get a book by ID.

        Raises:
            NotFoundError: If no book has this ID
        """
        book = self.repository.find_one(id=book_id)
        if book is None:
            logger.info(f"Book {book_id} not found")
            raise NotFoundError("Book", book_id)
        return book

    def update(self, book_id: str, data: BookUpdate) -> Book:
        """
        Apply the fields present in ``data`` and return the fresh row.

        Raises:
            NotFoundError: If the book is missing before the update, or
                has disappeared by the time it is read back
        """
        self.find_one(book_id)

        changes = data.model_dump(exclude_unset=True)
        self.repository.update(book_id, changes)

        updated = self.repository.find_one(id=book_id)
        if updated is None:
            logger.warning(f"Book {book_id} disappeared during update")
            raise NotFoundError("Book", book_id, stage="after update")

        logger.info(f"Updated book {book_id}: {sorted(changes)}")
        return updated

    def remove(self, book_id: str) -> None:
        """
        Delete a book.

        Raises:
            NotFoundError: If no book has this ID
        """
        self.find_one(book_id)
        self.repository.delete(book_id)
        logger.info(f"Deleted book {book_id}")
