"""
Repositories

Thin data-access objects, one per entity, wrapping a SQLAlchemy Session.

Services depend on these instead of issuing queries themselves, so a
service can be unit tested with a MagicMock standing in for the
repository.

Every write commits immediately: each call is its own unit of work.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from library_api.database import Base
from library_api.models import Book, User

ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyRepository(Generic[ModelT]):
    """
    Generic repository for a model with a single ``id`` primary key.

    Subclasses only set ``model``.
    """

    model: type[ModelT]

    def __init__(self, db: Session) -> None:
        self.db = db

    def save(self, entity: ModelT) -> ModelT:
        """Insert the entity and return it with server-generated values loaded."""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def find(self) -> list[ModelT]:
        """Return every row of the table."""
        stmt = select(self.model)
        return list(self.db.execute(stmt).scalars().all())

    def find_one(self, **criteria: Any) -> ModelT | None:
        """
        Return the first row matching all equality criteria, or None.

        Example:
            repo.find_one(id=book_id)
            repo.find_one(username="johndoe")
        """
        stmt = select(self.model).filter_by(**criteria).limit(1)
        return self.db.execute(stmt).scalars().first()

    def update(self, entity_id: str, values: dict[str, Any]) -> None:
        """
        Apply a partial update to one row.

        Only the keys present in ``values`` are written. An empty dict
        issues no statement.
        """
        if not values:
            return

        columns = {getattr(self.model, key): value for key, value in values.items()}
        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(columns)
        )
        self.db.execute(stmt)
        self.db.commit()

    def delete(self, entity_id: str) -> None:
        """Delete one row by primary key."""
        stmt = delete(self.model).where(self.model.id == entity_id)
        self.db.execute(stmt)
        self.db.commit()


class BookRepository(SQLAlchemyRepository[Book]):
    model = Book


class UserRepository(SQLAlchemyRepository[User]):
    model = User
