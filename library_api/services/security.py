"""
Security Service

Handles password hashing and JWT token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), work factor from BCRYPT_ROUNDS
2. JWT access token generation (python-jose)
3. Constant-time password verification

Usage:
    from library_api.services.security import hash_password, verify_password

    hashed = hash_password("password123")
    is_valid = verify_password("password123", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import jwt
from passlib.context import CryptContext

from library_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# - schemes: bcrypt only
# - deprecated: "auto" means hashes with other settings are flagged for rehash
# - bcrypt__rounds: work factor, tunable through BCRYPT_ROUNDS
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Bcrypt is deliberately slow. Callers run inside FastAPI's thread pool
    (sync route handlers), so hashing never blocks the event loop.

    Example:
        >>> hashed = hash_password("password123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Returns False (rather than raising) for hashes passlib cannot parse.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError as e:
        logger.warning(f"Unrecognised password hash: {e}")
        return False


# -------------------------------------------------------------------------
# JWT Token Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode in the token
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(UTC) + expires_delta
    else:
        expire = datetime.now(UTC) + timedelta(
            minutes=settings.access_token_expire_minutes
        )

    to_encode.update({"exp": expire, "type": "access"})

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM,
    )
