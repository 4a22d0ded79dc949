"""
Tests for Books API Endpoints

This module tests all CRUD operations for the /books endpoints.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

from datetime import date

from fastapi import status

MISSING_ID = "123e4567-e89b-12d3-a456-426614174999"


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_empty(self, client):
        """Test listing books when database is empty."""
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, sample_book):
        """Test listing books returns expected data."""
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["id"] == sample_book.id
        assert data[0]["title"] == "1984"
        assert data[0]["publishedYear"] == 1949

    def test_list_books_is_repeatable(self, client, multiple_books):
        """Two reads without a write return the same collection."""
        first = client.get("/books").json()
        second = client.get("/books").json()

        assert len(first) == 3
        assert sorted(first, key=lambda b: b["id"]) == sorted(second, key=lambda b: b["id"])


class TestGetBook:
    """Tests for GET /books/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book):
        """Test getting a book by ID."""
        response = client.get(f"/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": sample_book.id,
            "title": "1984",
            "author": "George Orwell",
            "publishedYear": 1949,
        }

    def test_get_book_not_found(self, client):
        """Test getting a non-existent book returns 404."""
        response = client.get(f"/books/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f"Book with ID {MISSING_ID} not found"


class TestCreateBook:
    """Tests for POST /books endpoint."""

    def test_create_book_success(self, client):
        """Test creating a book returns it with a generated id."""
        book_data = {"title": "T", "author": "A", "publishedYear": 2023}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"]
        assert data["title"] == "T"
        assert data["author"] == "A"
        assert data["publishedYear"] == 2023

    def test_create_book_keeps_input_unchanged(self, client):
        """Surrounding whitespace is kept; the book echoes its input."""
        book_data = {"title": "  Dune  ", "author": " Frank Herbert", "publishedYear": 1965}

        response = client.post("/books", json=book_data)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "  Dune  "
        assert data["author"] == " Frank Herbert"

        stored = client.get(f"/books/{data['id']}").json()
        assert stored["title"] == "  Dune  "

    def test_create_book_missing_fields(self, client):
        """Missing fields are rejected with 400 and a list of violations."""
        response = client.post("/books", json={"title": "No author"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        detail = response.json()["detail"]
        assert isinstance(detail, list)
        assert any(message.startswith("author") for message in detail)
        assert any(message.startswith("publishedYear") for message in detail)

    def test_create_book_empty_title(self, client):
        response = client.post(
            "/books",
            json={"title": "   ", "author": "A", "publishedYear": 2000},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_year_too_early(self, client):
        response = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": 999},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_year_next_year_allowed(self, client):
        next_year = date.today().year + 1

        response = client.post(
            "/books",
            json={"title": "Upcoming", "author": "A", "publishedYear": next_year},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["publishedYear"] == next_year

    def test_create_book_year_too_late(self, client):
        response = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": date.today().year + 2},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_year_not_integer(self, client):
        response = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": "last year"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_create_book_year_numeric_string_rejected(self, client):
        response = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": "2023"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert any(m.startswith("publishedYear") for m in response.json()["detail"])

    def test_create_book_year_float_rejected(self, client):
        response = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": 2023.0},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestUpdateBook:
    """Tests for PUT /books/{book_id} endpoint."""

    def test_update_book_partial(self, client, sample_book):
        """Only the provided field changes."""
        response = client.put(
            f"/books/{sample_book.id}",
            json={"publishedYear": 2025},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["publishedYear"] == 2025
        assert data["title"] == "1984"
        assert data["author"] == "George Orwell"

    def test_update_book_title(self, client, sample_book):
        response = client.put(
            f"/books/{sample_book.id}",
            json={"title": "Nineteen Eighty-Four"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "Nineteen Eighty-Four"
        assert response.json()["publishedYear"] == 1949

    def test_update_book_year_string_rejected(self, client, sample_book):
        response = client.put(
            f"/books/{sample_book.id}",
            json={"publishedYear": "2025"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_empty_body(self, client, sample_book):
        """An empty body changes nothing and returns the current book."""
        response = client.put(f"/books/{sample_book.id}", json={})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == "1984"

    def test_update_book_null_rejected(self, client, sample_book):
        response = client.put(f"/books/{sample_book.id}", json={"title": None})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_invalid_year(self, client, sample_book):
        response = client.put(f"/books/{sample_book.id}", json={"publishedYear": 42})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_not_found(self, client):
        response = client.put(f"/books/{MISSING_ID}", json={"title": "X"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == f"Book with ID {MISSING_ID} not found"


class TestDeleteBook:
    """Tests for DELETE /books/{book_id} endpoint."""

    def test_delete_book_success(self, client, sample_book):
        book_id = sample_book.id

        response = client.delete(f"/books/{book_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.content == b""

        # Verify it's gone
        response = client.get(f"/books/{book_id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, client):
        response = client.delete(f"/books/{MISSING_ID}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert MISSING_ID in response.json()["detail"]


class TestBookLifecycle:
    """Create, read, update and delete one book end to end."""

    def test_book_lifecycle(self, client):
        created = client.post(
            "/books",
            json={"title": "T", "author": "A", "publishedYear": 2023},
        )
        assert created.status_code == status.HTTP_201_CREATED
        book_id = created.json()["id"]

        fetched = client.get(f"/books/{book_id}")
        assert fetched.status_code == status.HTTP_200_OK
        assert fetched.json() == created.json()

        updated = client.put(f"/books/{book_id}", json={"publishedYear": 2025})
        assert updated.status_code == status.HTTP_200_OK
        assert updated.json() == {
            "id": book_id,
            "title": "T",
            "author": "A",
            "publishedYear": 2025,
        }

        deleted = client.delete(f"/books/{book_id}")
        assert deleted.status_code == status.HTTP_200_OK

        gone = client.get(f"/books/{book_id}")
        assert gone.status_code == status.HTTP_404_NOT_FOUND
