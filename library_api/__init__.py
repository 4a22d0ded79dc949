"""
Library API Application Package

REST API for managing books and users.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- models/: SQLAlchemy ORM models (Book, User)
- schemas/: Pydantic request/response schemas
- repositories.py: Per-entity data access
- services/: Business logic (books, users, password hashing, tokens)
- dependencies.py: FastAPI dependency wiring
- routers/: API route handlers
- exceptions.py: Application exceptions
- main.py: FastAPI application factory and configuration
"""

__version__ = "0.1.0"
