"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /books                       : ListBooks
- POST /books                       : CreateBook
- GET  /books/search                : SearchBooks (NDJSON stream)
- GET  /books/category/{category}   : FindBooksByCategory
- GET  /books/{book_id}             : GetBook

Lookups that miss and filters without matches answer 200 with an empty
payload; they are normal outcomes, not errors.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from .schemas import (
    BookCategory,
    BookListResponse,
    BookResponse,
    CreateBookRequest,
    SearchEvent,
)
from .store import BookRepository
from .streaming import DEFAULT_SEARCH_DELAY, stream_search

logger = logging.getLogger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_repository(request: Request) -> BookRepository:
    """Dependency returning the repository owned by the running app."""
    return request.app.state.repository


def get_search_delay(request: Request) -> float:
    return getattr(request.app.state, "search_delay", DEFAULT_SEARCH_DELAY)


@router.get("/books", response_model=BookListResponse)
def list_books(repo: BookRepository = Depends(get_repository)) -> BookListResponse:
    return BookListResponse(books=repo.list())


@router.post("/books", response_model=BookResponse)
def create_book(
    req: CreateBookRequest,
    repo: BookRepository = Depends(get_repository),
) -> BookResponse:
    if req.id is not None:
        logger.debug("Ignoring client supplied id %s on CreateBook", req.id)
    return BookResponse(book=repo.create_from_request(req))


@router.get("/books/search")
async def search_books(
    request: Request,
    query: str = Query(default="", description="Substring of title or author"),
    max_results: Optional[int] = Query(default=0, description="Result cap, 0 or less means no cap"),
    repo: BookRepository = Depends(get_repository),
    delay: float = Depends(get_search_delay),
) -> StreamingResponse:
    """Stream matching books as NDJSON, one line per book.

    The last line is always ``{"done": true}`` unless the client
    disconnects first, in which case production stops immediately.
    """

    async def _lines() -> AsyncIterator[str]:
        books = stream_search(repo, query, max_results, delay)
        try:
            async for book in books:
                if await request.is_disconnected():
                    logger.info("Client disconnected during SearchBooks for %r", query)
                    return
                yield SearchEvent(book=book).model_dump_json(include={"book"}) + "\n"
            yield SearchEvent(done=True).model_dump_json(include={"done"}) + "\n"
        except asyncio.CancelledError:
            logger.info("SearchBooks for %r cancelled", query)
            raise
        finally:
            await books.aclose()

    return StreamingResponse(_lines(), media_type=NDJSON_MEDIA_TYPE)


@router.get("/books/category/{category}", response_model=BookListResponse)
def find_books_by_category(
    category: BookCategory,
    repo: BookRepository = Depends(get_repository),
) -> BookListResponse:
    return BookListResponse(books=repo.find_by_category(category))


@router.get("/books/{book_id}", response_model=BookResponse)
def get_book(book_id: int, repo: BookRepository = Depends(get_repository)) -> BookResponse:
    # A miss is returned as {"book": null}, not as a 404
    return BookResponse(book=repo.get(book_id))
