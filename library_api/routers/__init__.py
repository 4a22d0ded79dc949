"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- books.py: /books/* endpoints
- users.py: /users/* endpoints
- auth.py: /auth/login endpoint

Each router is imported and registered in main.py.
"""

from library_api.routers.auth import router as auth_router
from library_api.routers.books import router as books_router
from library_api.routers.users import router as users_router

__all__ = [
    "books_router",
    "users_router",
    "auth_router",
]
