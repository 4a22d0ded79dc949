"""
Users Router

CRUD endpoints for users.

Every response is a UserResponse (id, username, email). The service
already returns that projection, and response_model enforces it once
more at the HTTP boundary.
"""

from fastapi import APIRouter, Response, status

from library_api.dependencies import UserServiceDep
from library_api.schemas import UserCreate, UserResponse, UserUpdate

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        404: {"description": "User not found"},
    },
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="""
    Create a user account.

    **Requirements:**
    - username: non-empty
    - email: valid email address
    - password: at least 8 characters (stored as a bcrypt hash)
    """,
    responses={400: {"description": "Validation error"}},
)
def create_user(
    user_data: UserCreate,
    service: UserServiceDep,
) -> UserResponse:
    return service.create(user_data)


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(service: UserServiceDep) -> list[UserResponse]:
    return service.find_all()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
def get_user(user_id: str, service: UserServiceDep) -> UserResponse:
    return service.find_one(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Update only the fields present in the request body. "
                "A new password is hashed before it is stored.",
    responses={400: {"description": "Validation error"}},
)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    service: UserServiceDep,
) -> UserResponse:
    return service.update(user_id, user_data)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a user",
)
def delete_user(user_id: str, service: UserServiceDep) -> Response:
    service.remove(user_id)
    return Response(status_code=status.HTTP_200_OK)
