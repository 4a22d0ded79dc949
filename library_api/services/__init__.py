"""
Services Package

Business logic, kept separate from HTTP handling so it can be tested
without a client:

- books.py: BookService (CRUD with existence checks)
- users.py: UserService (CRUD, password hashing, safe projection)
- security.py: Password hashing and JWT utilities
"""
