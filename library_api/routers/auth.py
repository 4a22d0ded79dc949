"""
Authentication Router

POST /auth/login exchanges a username and password for a JWT access token.

Security:
=========
- Credentials are checked against the bcrypt hash returned by
  UserService.find_by_username, the only place the hash is read
- Plain text passwords are never logged
- Unknown user and wrong password give the same 401 response
- Tokens are stateless; nothing is stored server side
"""

import logging

from fastapi import APIRouter, HTTPException, status

from library_api.config import get_settings
from library_api.dependencies import UserServiceDep
from library_api.schemas import LoginRequest, TokenResponse
from library_api.services.security import create_access_token, verify_password

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    responses={
        401: {"description": "Invalid credentials"},
    },
)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with username and password",
    description="""
    Authenticate with username and password to receive a JWT access token.

    **Usage:**
    Include the access token in the Authorization header:
    ```
    Authorization: Bearer <access_token>
    ```
    """,
)
def login(
    credentials: LoginRequest,
    service: UserServiceDep,
) -> TokenResponse:
    user = service.find_by_username(credentials.username)

    if user is None or not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Login failed for username {credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token({"sub": user.id, "username": user.username})
    logger.info(f"User logged in: {user.id}")

    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,
    )
