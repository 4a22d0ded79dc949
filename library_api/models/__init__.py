"""
SQLAlchemy Models Package

This package contains all database models for the Library API.
Models are SQLAlchemy ORM classes that map to database tables.

Import all models here to:
1. Make them available as: from library_api.models import Book, User
2. Ensure Base.metadata knows every table before create_all()
"""

from library_api.models.book import Book
from library_api.models.user import User

__all__ = [
    "Book",
    "User",
]
