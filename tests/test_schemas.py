import pytest
from pydantic import ValidationError

from book_server.catalog.schemas import Book, BookCategory, CreateBookRequest


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("TECHNOLOGY", BookCategory.TECHNOLOGY),
        ("fiction", BookCategory.FICTION),
        (" Technology ", BookCategory.TECHNOLOGY),
        ("2", BookCategory.FICTION),
        (1, BookCategory.TECHNOLOGY),
        (0, BookCategory.UNSPECIFIED),
        (7, BookCategory.UNSPECIFIED),
        ("POETRY", BookCategory.UNSPECIFIED),
        ("", BookCategory.UNSPECIFIED),
    ],
)
def test_category_lookup(raw, expected):
    assert BookCategory(raw) is expected


def test_request_defaults_to_unspecified_category():
    req = CreateBookRequest(title="t", author="a")
    assert req.category is BookCategory.UNSPECIFIED
    assert req.id is None


def test_book_is_frozen():
    book = Book(id=1, title="Clean Code", author="Robert C. Martin")
    with pytest.raises(ValidationError):
        book.title = "Dirty Code"
