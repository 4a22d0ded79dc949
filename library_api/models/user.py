"""
User Model

Represents an account of the Library API.

The password is only ever stored as a bcrypt hash in ``hashed_password``.
Nothing outside UserService.find_by_username hands this column out; every
other read path goes through the UserResponse projection.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base
from library_api.models.book import generate_id


class User(Base):
    """
    User model representing registered users in the system.

    Table: users

    Indexes:
    - Primary key on id (automatic)
    - username: Index for login lookups (not unique)

    Example:
        user = User(
            username="johndoe",
            email="john@example.com",
            hashed_password=hash_password("password123"),
        )
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=generate_id,
    )

    username: Mapped[str] = mapped_column(
        String(50),
        index=True,
        nullable=False,
        comment="Username used to log in"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's email address"
    )

    hashed_password: Mapped[str] = mapped_column(
        "password",
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id={self.id}, username='{self.username}', email='{self.email}')"
