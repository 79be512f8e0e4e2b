"""Endpoint behaviour with the book service substituted."""

import pytest
from fastapi.testclient import TestClient

from book_api.app.api.deps import get_book_service
from book_api.app.api.v1.endpoints.books import parse_book_id
from book_api.app.core.exceptions import BookStoreError
from book_api.app.main import create_app
from book_api.app.services.book_store import InsertOutcome, InsertResult

from .conftest import FakeBookService, make_settings


BOOKS_URL = "/api/v1/books"


class TestGetBooks:
    def test_status_code_200(self, client):
        res = client.get(BOOKS_URL)
        assert res.status_code == 200

    def test_empty_array_when_service_returns_nothing(self, client):
        res = client.get(BOOKS_URL)
        assert res.json() == []

    def test_returns_array_of_books(self, client, fake_service, dummy_books):
        fake_service.books = {book.book_id: book for book in dummy_books}

        res = client.get(BOOKS_URL)

        assert res.json() == [book.model_dump(by_alias=True) for book in dummy_books]
        assert len(res.json()) == 2

    def test_service_failure_is_not_handled(self, client, fake_service):
        async def broken():
            raise BookStoreError("database is gone")

        fake_service.list_books = broken
        with pytest.raises(BookStoreError):
            client.get(BOOKS_URL)


class TestGetBook:
    def test_status_code_200_for_a_book_that_is_found(self, client, fake_service, dummy_books):
        fake_service.books = {book.book_id: book for book in dummy_books}

        res = client.get(f"{BOOKS_URL}/2")

        assert res.status_code == 200
        assert res.json() == dummy_books[1].model_dump(by_alias=True)
        assert ("get", 2) in fake_service.calls

    def test_status_code_404_for_a_book_that_is_not_found(self, client):
        res = client.get(f"{BOOKS_URL}/77")

        assert res.status_code == 404
        assert res.text == "Book with id 77 was not found"
        assert res.headers["content-type"].startswith("text/plain")

    def test_non_numeric_id_is_not_found(self, client, fake_service):
        res = client.get(f"{BOOKS_URL}/abc")

        assert res.status_code == 404
        assert res.text == "Book with id abc was not found"
        assert fake_service.calls == []


class TestSaveBook:
    new_book = {
        "bookId": 3,
        "title": "Fantastic Mr. Fox",
        "author": "Roald Dahl",
        "description": "Book about fantastic fox",
    }

    def test_status_code_201_for_a_valid_book(self, client):
        res = client.post(BOOKS_URL, json=self.new_book)

        assert res.status_code == 201
        assert res.json() == self.new_book

    def test_payload_is_passed_to_the_service_unchanged(self, client, fake_service):
        client.post(BOOKS_URL, json=self.new_book)
        assert fake_service.calls == [("save", self.new_book)]

    def test_400_when_book_details_are_invalid(self, client, fake_service):
        fake_service.insert_result = InsertResult(InsertOutcome.INVALID, detail="bookId missing")

        res = client.post(BOOKS_URL, json={"title": "Fantastic Mr. Fox", "author": "Roald Dahl"})

        assert res.status_code == 400
        assert res.text == "Invalid book details"

    def test_400_when_book_already_exists(self, client, fake_service):
        fake_service.insert_result = InsertResult(InsertOutcome.DUPLICATE_KEY)

        res = client.post(BOOKS_URL, json={**self.new_book, "bookId": 1})

        assert res.status_code == 400
        assert res.text == "The book already exists"

    def test_unclassified_failure_surfaces_as_server_error(self, fake_service):
        fake_service.insert_result = InsertResult(InsertOutcome.OTHER, detail="disk I/O error")
        app = create_app(make_settings(), service=fake_service)

        with pytest.raises(BookStoreError, match="disk I/O error"):
            TestClient(app).post(BOOKS_URL, json=self.new_book)

        res = TestClient(app, raise_server_exceptions=False).post(BOOKS_URL, json=self.new_book)
        assert res.status_code == 500


class TestUpdateBook:
    @pytest.mark.parametrize("method", ["put", "patch"])
    def test_status_code_204(self, client, fake_service, dummy_books, method):
        fake_service.books = {book.book_id: book for book in dummy_books}

        res = getattr(client, method)(f"{BOOKS_URL}/1", json={"title": "There and Back Again"})

        assert res.status_code == 204
        assert res.content == b""
        assert fake_service.calls == [("update", 1, {"title": "There and Back Again"})]

    def test_unknown_book_still_answers_204(self, client):
        res = client.put(f"{BOOKS_URL}/99", json={"title": "Nothing"})
        assert res.status_code == 204

    def test_non_numeric_id_does_not_reach_the_service(self, client, fake_service):
        res = client.put(f"{BOOKS_URL}/abc", json={"title": "Nothing"})

        assert res.status_code == 204
        assert fake_service.calls == []


class TestDeleteBook:
    def test_status_code_200_for_a_book_that_is_deleted(self, client, fake_service, dummy_books):
        fake_service.books = {book.book_id: book for book in dummy_books}

        res = client.delete(f"{BOOKS_URL}/2")

        assert res.status_code == 200
        assert res.text == "Book with id 2 has been successfully deleted"

    def test_status_code_404_for_a_book_that_cannot_be_deleted(self, client):
        res = client.delete(f"{BOOKS_URL}/55")

        assert res.status_code == 404
        assert res.text == "Book with id 55 was not found"


def test_service_can_be_overridden_as_a_dependency(dummy_books):
    app = create_app(make_settings(), service=FakeBookService())
    app.dependency_overrides[get_book_service] = lambda: FakeBookService(dummy_books)
    try:
        res = TestClient(app).get(f"{BOOKS_URL}/1")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 200
    assert res.json()["title"] == "The Hobbit"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("7", 7),
        ("1.0", 1),
        ("1e3", 1000),
        (" 2 ", 2),
        ("-3", -3),
        ("9223372036854775807", 2**63 - 1),
        ("9223372036854775808", None),
        ("99999999999999999999", None),
        ("1.5", None),
        ("1_0", None),
        ("abc", None),
        ("inf", None),
        ("nan", None),
    ],
)
def test_parse_book_id(raw, expected):
    assert parse_book_id(raw) == expected


def test_integral_decimal_id_finds_the_book(client, fake_service, dummy_books):
    fake_service.books = {book.book_id: book for book in dummy_books}

    res = client.get(f"{BOOKS_URL}/1.0")

    assert res.status_code == 200
    assert res.json()["title"] == "The Hobbit"
    assert fake_service.calls == [("get", 1)]
