"""
In-memory data store for the catalogue API.

``BookRepository`` is the single shared mutable resource of the
service. It keeps an insertion-ordered ``dict`` of id -> ``Book`` and
the id counter behind one ``threading.Lock`` so that request handlers
running in FastAPI's thread pool (or on the event loop) can call it
concurrently without any locking of their own.

Readers never hold the lock longer than it takes to copy the values.
``list()`` and ``find_by_category()`` work on a snapshot taken at call
time; ``search()`` is a generator and takes its snapshot when the first
result is requested. A book created while a search is being consumed
is not part of that search.
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional

from .schemas import Book, BookCategory, CreateBookRequest

logger = logging.getLogger(__name__)


SAMPLE_BOOKS: List[Book] = [
    Book(
        id=1,
        title="Clean Code",
        author="Robert C. Martin",
        isbn="978-0132350884",
        category=BookCategory.TECHNOLOGY,
        price=47.99,
    ),
    Book(
        id=2,
        title="Effective Java",
        author="Joshua Bloch",
        isbn="978-0134685991",
        category=BookCategory.TECHNOLOGY,
        price=54.99,
    ),
    Book(
        id=3,
        title="1984",
        author="George Orwell",
        isbn="978-0451524935",
        category=BookCategory.FICTION,
        price=15.99,
    ),
]


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize.

    Returns
    -------
    str
        The lowercased string. An empty string is returned when the
        input is ``None`` or empty.
    """
    return (s or "").lower()


def _matches(book: Book, needle: str) -> bool:
    return needle in _norm(book.title) or needle in _norm(book.author)


class BookRepository:
    """Concurrency-safe, insertion-ordered store of books."""

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @classmethod
    def with_sample_books(cls) -> "BookRepository":
        repo = cls()
        repo.seed(SAMPLE_BOOKS)
        return repo

    def seed(self, books: Iterable[Book]) -> None:
        """Insert pre-built books keeping their ids.

        The id counter is moved past the highest id seen so that
        ``create()`` never hands out a seeded identifier.
        """
        with self._lock:
            for book in books:
                self._books[book.id] = book
                if book.id >= self._next_id:
                    self._next_id = book.id + 1
        logger.info("Seeded catalogue with %d books, next id %d", len(self._books), self._next_id)

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    @property
    def next_id(self) -> int:
        """The id the next ``create()`` call will assign."""
        with self._lock:
            return self._next_id

    def get(self, book_id: int) -> Optional[Book]:
        """Return the book with ``book_id`` or ``None`` when unknown."""
        with self._lock:
            return self._books.get(book_id)

    def list(self) -> List[Book]:
        with self._lock:
            return list(self._books.values())

    def create(
        self,
        title: str,
        author: str,
        isbn: str,
        category: BookCategory,
        price: float,
    ) -> Book:
        """Allocate the next id and store a new book.

        Allocation and insertion happen under the same lock, so two
        concurrent callers can never receive the same id or lose an
        insert.
        """
        with self._lock:
            book_id = self._next_id
            self._next_id += 1
            book = Book(
                id=book_id,
                title=title,
                author=author,
                isbn=isbn,
                category=BookCategory(category),
                price=price,
            )
            self._books[book_id] = book
        logger.info("Created book %d: %s", book.id, book.title)
        return book

    def create_from_request(self, req: CreateBookRequest) -> Book:
        # req.id is deliberately not forwarded: ids are server-assigned
        return self.create(
            title=req.title,
            author=req.author,
            isbn=req.isbn,
            category=req.category,
            price=req.price,
        )

    def find_by_category(self, category: BookCategory) -> List[Book]:
        wanted = BookCategory(category)
        return [b for b in self.list() if b.category == wanted]

    def search(self, query: Optional[str], max_results: Optional[int] = 0) -> Iterator[Book]:
        """Lazily yield books whose title or author contains ``query``.

        Matching is case-insensitive. ``max_results`` caps the number
        of yielded books; ``None``, zero or a negative value means no
        cap. The snapshot is taken on the first ``next()`` call and the
        lock is released before anything is yielded.

        Parameters
        ----------
        query : Optional[str]
            Substring to look for. An empty query matches every book.
        max_results : Optional[int]
            Maximum number of books to yield.

        Yields
        ------
        Book
            Matching books in insertion order.
        """
        needle = _norm(query)
        limit = max_results if max_results and max_results > 0 else None
        found = 0
        for book in self.list():
            if limit is not None and found >= limit:
                return
            if _matches(book, needle):
                found += 1
                yield book
