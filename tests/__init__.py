"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: /books endpoints
- test_users.py: /users endpoints
- test_auth.py: /auth/login endpoint
- test_book_service.py / test_user_service.py: service logic with mocked repositories
- test_security.py: password hashing and JWT helpers
- test_app.py: health, root and configuration

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
