"""
Book Pydantic Schemas

Request and response shapes for the /books endpoints.

The JSON field for the publication year is ``publishedYear``; on the
Python side it is ``published_year``, like the model attribute. Both
spellings are accepted on input, responses always use ``publishedYear``.
The year must be a JSON integer; strings such as "1949" are rejected.
"""

from datetime import date

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    field_validator,
)

MIN_PUBLISHED_YEAR = 1000


def max_published_year() -> int:
    """Latest accepted year: next year, so announced books can be listed."""
    return date.today().year + 1


def check_published_year(v: int) -> int:
    """Shared range check for create and update payloads."""
    upper = max_published_year()
    if not MIN_PUBLISHED_YEAR <= v <= upper:
        raise ValueError(
            f"publishedYear must be between {MIN_PUBLISHED_YEAR} and {upper}"
        )
    return v


def check_text(v: str, field: str) -> str:
    """Reject blank text. Accepted text is stored exactly as sent."""
    if not v.strip():
        raise ValueError(f"{field} cannot be empty or whitespace")
    return v


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["George Orwell"],
    )

    published_year: StrictInt = Field(
        ...,
        validation_alias=AliasChoices("publishedYear", "published_year"),
        serialization_alias="publishedYear",
        description="Year of publication (1000 to next year)",
        examples=[1949],
    )


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "publishedYear": 1949
    }
    """

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        return check_text(v, "title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        return check_text(v, "author")

    @field_validator("published_year")
    @classmethod
    def published_year_in_range(cls, v: int) -> int:
        return check_published_year(v)


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional. Fields left out of the request body are not
    touched (routers read it with ``model_dump(exclude_unset=True)``).
    Sending an explicit ``null`` is rejected because every column is
    required.
    """

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=500,
        description="Book title",
    )

    author: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="Author name",
    )

    published_year: StrictInt | None = Field(
        default=None,
        validation_alias=AliasChoices("publishedYear", "published_year"),
        serialization_alias="publishedYear",
        description="Year of publication (1000 to next year)",
    )

    @field_validator("title", "author", "published_year")
    @classmethod
    def must_not_be_null(cls, v):
        """Defaults are not validated, so only an explicit null gets here."""
        if v is None:
            raise ValueError("field cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        return check_text(v, "title")

    @field_validator("author")
    @classmethod
    def author_must_not_be_empty(cls, v: str) -> str:
        return check_text(v, "author")

    @field_validator("published_year")
    @classmethod
    def published_year_in_range(cls, v: int) -> int:
        return check_published_year(v)


class BookResponse(BookBase):
    """Schema for book responses."""

    id: str = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0b7f2f4e-3c1d-4d8a-9a59-7c6b2a0e5f10",
                "title": "1984",
                "author": "George Orwell",
                "publishedYear": 1949,
            }
        },
    )
