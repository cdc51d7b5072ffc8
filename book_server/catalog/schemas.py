"""
Pydantic schema definitions for the catalog module.

The ``Book`` model is the record stored by the repository and returned
by every catalogue endpoint. It is frozen so that callers can never
mutate a stored record in place. The request/response wrappers mirror
the RPC messages of the service: ``BookResponse`` carries an optional
book (``None`` when a lookup misses), ``BookListResponse`` carries a
list, and ``SearchEvent`` is one line of the streamed search output.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookCategory(str, Enum):
    """Closed set of book categories.

    Unknown values never fail validation: they fall back to
    ``UNSPECIFIED``. Names are matched case-insensitively and the
    ordinals of the original message definition (0, 1, 2) are accepted
    as well.
    """

    UNSPECIFIED = "UNSPECIFIED"
    TECHNOLOGY = "TECHNOLOGY"
    FICTION = "FICTION"

    @classmethod
    def _missing_(cls, value: Any) -> "BookCategory":
        if isinstance(value, str):
            name = value.strip().upper()
            for member in cls:
                if member.value == name:
                    return member
            if name.isdigit():
                value = int(name)
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return cls.UNSPECIFIED


class Book(BaseModel):
    """A single catalogue entry.

    ``id`` is always assigned by the repository. ``isbn`` is free text
    and ``price`` is stored as given; neither is validated.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    author: str
    isbn: str = ""
    category: BookCategory = BookCategory.UNSPECIFIED
    price: float = 0.0


class CreateBookRequest(BaseModel):
    """Payload of CreateBook.

    ``id`` is accepted for wire compatibility but always ignored: the
    repository assigns identifiers.
    """

    id: Optional[int] = None
    title: str = ""
    author: str = ""
    isbn: str = ""
    category: BookCategory = BookCategory.UNSPECIFIED
    price: float = 0.0


class BookResponse(BaseModel):
    # book is None when the requested id is unknown
    book: Optional[Book] = None


class BookListResponse(BaseModel):
    books: List[Book] = Field(default_factory=list)


class SearchEvent(BaseModel):
    """One line of the SearchBooks stream.

    Every match is sent as ``{"book": {...}}``; the stream ends with a
    single ``{"done": true}`` line.
    """

    book: Optional[Book] = None
    done: bool = False
