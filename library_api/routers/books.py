"""
Books Router

CRUD endpoints for books.

Handlers only translate between HTTP and BookService: the body arrives
already validated by Pydantic, the path parameter is the book id, and
NotFoundError raised by the service becomes a 404 in main.py.
"""

from fastapi import APIRouter, Response, status

from library_api.dependencies import BookServiceDep
from library_api.models import Book
from library_api.schemas import BookCreate, BookResponse, BookUpdate

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"description": "Validation error"}},
)
def create_book(
    book_data: BookCreate,
    service: BookServiceDep,
) -> Book:
    """
    Create a new book.

    Example request body:
        {"title": "1984", "author": "George Orwell", "publishedYear": 1949}
    """
    return service.create(book_data)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
)
def list_books(service: BookServiceDep) -> list[Book]:
    """Return every book. The list is empty when there are none."""
    return service.find_all()


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: str, service: BookServiceDep) -> Book:
    return service.find_one(book_id)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Update only the fields present in the request body.",
    responses={400: {"description": "Validation error"}},
)
def update_book(
    book_id: str,
    book_data: BookUpdate,
    service: BookServiceDep,
) -> Book:
    """
    Update an existing book.

    PUT with optional fields (PATCH-like behavior): fields missing from
    the body keep their current values.
    """
    return service.update(book_id, book_data)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a book",
)
def delete_book(book_id: str, service: BookServiceDep) -> Response:
    """Delete a book. Responds 200 with an empty body."""
    service.remove(book_id)
    return Response(status_code=status.HTTP_200_OK)
