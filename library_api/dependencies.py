"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

The chain for every request is:

    get_db ──▶ repository ──▶ service ──▶ route handler

Tests swap the database by overriding get_db; service unit tests skip
the chain and hand a MagicMock repository straight to the service.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from library_api.database import get_db
from library_api.repositories import BookRepository, UserRepository
from library_api.services.books import BookService
from library_api.services.users import UserService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(service: BookService = Depends(get_book_service)):
#
# You can write:
#   def list_books(service: BookServiceDep):

DbSession = Annotated[Session, Depends(get_db)]


def get_book_repository(db: DbSession) -> BookRepository:
    return BookRepository(db)


def get_user_repository(db: DbSession) -> UserRepository:
    return UserRepository(db)


def get_book_service(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    """Book service bound to the request's database session."""
    return BookService(repository)


def get_user_service(
    repository: Annotated[UserRepository, Depends(get_user_repository)],
) -> UserService:
    """User service bound to the request's database session."""
    return UserService(repository)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
