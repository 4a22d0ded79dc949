#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books and users for development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

This script:
1. Creates tables if they don't exist
2. Clears existing data (optional)
3. Creates sample books and users through the services, so user
   passwords are hashed exactly as they are over the API
"""

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Book, User
from library_api.repositories import BookRepository, UserRepository
from library_api.schemas import BookCreate, UserCreate
from library_api.services.books import BookService
from library_api.services.users import UserService


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")
    books_data = [
        {"title": "1984", "author": "George Orwell", "publishedYear": 1949},
        {"title": "Animal Farm", "author": "George Orwell", "publishedYear": 1945},
        {"title": "Pride and Prejudice", "author": "Jane Austen", "publishedYear": 1813},
        {"title": "Foundation", "author": "Isaac Asimov", "publishedYear": 1951},
        {"title": "The Hobbit", "author": "J.R.R. Tolkien", "publishedYear": 1937},
        {"title": "I, Robot", "author": "Isaac Asimov", "publishedYear": 1950},
    ]

    service = BookService(BookRepository(db))
    books = [service.create(BookCreate.model_validate(data)) for data in books_data]

    print(f"Created {len(books)} books.")
    return books


def create_users(db: Session) -> int:
    """Create sample users. Returns how many were created."""
    print("Creating users...")
    users_data = [
        {"username": "admin", "email": "admin@example.com", "password": "adminpass123"},
        {"username": "reader", "email": "reader@example.com", "password": "readerpass123"},
    ]

    service = UserService(UserRepository(db))
    for data in users_data:
        service.create(UserCreate.model_validate(data))

    print(f"Created {len(users_data)} users.")
    return len(users_data)


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)
        user_count = create_users(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Books: {len(books)}")
        print(f"  - Users: {user_count}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
