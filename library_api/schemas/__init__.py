"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schemas are kept apart from the SQLAlchemy models so the API controls
exactly what is exposed: UserResponse, for instance, has no password.

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from library_api.schemas.user import (
    LoginRequest,
    TokenResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)

__all__ = [
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Auth schemas
    "LoginRequest",
    "TokenResponse",
]
