"""
Library API Exceptions

Application-specific exceptions raised by the service layer.

Services never raise HTTPException: they raise these, and the handlers
registered in main.py turn them into HTTP responses.

Exception Hierarchy:
    LibraryAPIError (base)    → 500 Internal Server Error
    └── NotFoundError         → 404 Not Found

Request body validation is handled by Pydantic; FastAPI raises
RequestValidationError, which main.py maps to 400 Bad Request.
"""

from typing import Any, Dict, Optional


class LibraryAPIError(Exception):
    """
    Base exception for all Library API errors.

    Attributes:
        message: User-facing error description (safe to return in a response)
        context: Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(LibraryAPIError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; the services turn that None
    into NotFoundError so routers stay free of existence checks.

    The message embeds the id and, for the re-fetch after an update, the
    stage at which the row went missing:

        >>> str(NotFoundError("Book", "42"))
        'Book with ID 42 not found'
        >>> str(NotFoundError("Book", "42", stage="after update"))
        'Book with ID 42 not found after update'
    """

    def __init__(
        self,
        resource: str,
        resource_id: str,
        stage: Optional[str] = None,
    ):
        message = f"{resource} with ID {resource_id} not found"
        if stage:
            message = f"{message} {stage}"
        super().__init__(
            message=message,
            context={"resource": resource, "resource_id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id
