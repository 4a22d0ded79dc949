"""
User Service

Business logic for users. Same existence-check pattern as BookService,
plus two rules:

1. Passwords are bcrypt-hashed before they reach the repository, on
   create and on update. An update without a password leaves the stored
   hash alone.
2. Everything returned to callers is a UserResponse (id, username,
   email). The one exception is find_by_username, which returns the raw
   User with its hash for credential checks in the login flow.
"""

import logging

from library_api.exceptions import NotFoundError
from library_api.models import User
from library_api.repositories import UserRepository
from library_api.schemas.user import UserCreate, UserResponse, UserUpdate
from library_api.services.security import hash_password

logger = logging.getLogger(__name__)


def to_safe_user(user: User) -> UserResponse:
    """Project a User onto the fields that may leave the service."""
    return UserResponse.model_validate(user)


class UserService:
    """CRUD operations for users."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def create(self, data: UserCreate) -> UserResponse:
        """
        Register a user.

        The plain password is replaced by its hash before anything is
        persisted.
        """
        values = data.model_dump(exclude={"password"})
        user = self.repository.save(
            User(**values, hashed_password=hash_password(data.password))
        )
        logger.info(f"Created user {user.id}")
        return to_safe_user(user)

    def find_all(self) -> list[UserResponse]:
        return [to_safe_user(user) for user in self.repository.find()]

    def find_one(self, user_id: str) -> UserResponse:
        """
        Get a user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        return to_safe_user(self._get_or_raise(user_id))

    def find_by_username(self, username: str) -> User | None:
        """
        Look up the raw User, password hash included.

        Only for credential verification; never return the result over HTTP.
        """
        return self.repository.find_one(username=username)

    def update(self, user_id: str, data: UserUpdate) -> UserResponse:
        """
        Apply the fields present in ``data`` and return the fresh user.

        Raises:
            NotFoundError: If the user is missing before the update, or
                has disappeared by the time it is read back
        """
        self._get_or_raise(user_id)

        changes = data.model_dump(exclude_unset=True)
        if "password" in changes:
            changes["hashed_password"] = hash_password(changes.pop("password"))

        self.repository.update(user_id, changes)

        updated = self.repository.find_one(id=user_id)
        if updated is None:
            logger.warning(f"User {user_id} disappeared during update")
            raise NotFoundError("User", user_id, stage="after update")

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return to_safe_user(updated)

    def remove(self, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            NotFoundError: If no user has this ID
        """
        self._get_or_raise(user_id)
        self.repository.delete(user_id)
        logger.info(f"Deleted user {user_id}")

    def _get_or_raise(self, user_id: str) -> User:
        user = self.repository.find_one(id=user_id)
        if user is None:
            logger.info(f"User {user_id} not found")
            raise NotFoundError("User", user_id)
        return user
