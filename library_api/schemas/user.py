"""
User Pydantic Schemas

These schemas define the shape of data for User-related API operations.

Schemas:
- UserCreate: Registration data (username, email, password)
- UserUpdate: Same fields, all optional
- UserResponse: Safe projection {id, username, email}; never a password
- LoginRequest / TokenResponse: Body and result of POST /auth/login
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128


def check_email(v: str) -> str:
    """
    Validate an email address and return it unchanged (the domain keeps
    its original case).
    """
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return v


class UserCreate(BaseModel):
    """Schema for user registration."""

    username: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Username used to log in",
        examples=["johndoe"],
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User's email address",
        examples=["john@example.com"],
    )

    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="Password (min 8 chars); stored only as a bcrypt hash",
        examples=["password123"],
    )

    @field_validator("username")
    @classmethod
    def username_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return check_email(v)


class UserUpdate(BaseModel):
    """
    Schema for updating a user.

    All fields are optional. A missing password means "keep the current
    one"; it never clears it.
    """

    username: str | None = Field(
        default=None,
        min_length=1,
        max_length=50,
        description="Username used to log in",
    )

    email: str | None = Field(
        default=None,
        max_length=255,
        description="User's email address",
    )

    password: str | None = Field(
        default=None,
        min_length=PASSWORD_MIN_LENGTH,
        max_length=PASSWORD_MAX_LENGTH,
        description="New password",
    )

    @field_validator("username", "email", "password")
    @classmethod
    def must_not_be_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("username")
    @classmethod
    def username_must_not_be_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username cannot be empty or whitespace")
        return v

    @field_validator("email")
    @classmethod
    def email_must_be_valid(cls, v: str) -> str:
        return check_email(v)


class UserResponse(BaseModel):
    """
    Schema for user responses (what the API returns).

    SECURITY: Never includes the password or its hash.
    """

    id: str = Field(..., description="Unique user identifier")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="User's email address")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "5e1c6a3b-2f4d-4b8e-8f7a-1d2c3b4a5e6f",
                "username": "johndoe",
                "email": "john@example.com",
            }
        },
    )


# =============================================================================
# Authentication Schemas
# =============================================================================


class LoginRequest(BaseModel):
    """Credentials posted to /auth/login."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class TokenResponse(BaseModel):
    """Access token issued after a successful login."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        },
    )
