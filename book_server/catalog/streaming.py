"""
Paced, cancellable delivery of search results.

``stream_search`` turns the lazy ``BookRepository.search`` generator
into an async generator that hands each match to the consumer and then
pauses before computing the next one. The pause is an ``asyncio.sleep``
so it neither blocks the event loop nor holds the repository lock.

If the consumer closes the generator or the task awaiting it is
cancelled (for example because the HTTP client went away), iteration
stops at the current suspension point and no further matches are
computed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Optional

from .schemas import Book
from .store import BookRepository

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DELAY = 0.3


async def stream_search(
    repository: BookRepository,
    query: Optional[str],
    max_results: Optional[int] = 0,
    delay: float = DEFAULT_SEARCH_DELAY,
) -> AsyncIterator[Book]:
    """Yield matching books one at a time, pausing ``delay`` seconds between them.

    A match is only computed once the consumer asks for it, i.e. after
    the previous one has been delivered. The pause sits between two
    emissions, so the stream ends as soon as the last match is out.
    """
    logger.info("SearchBooks stream: query=%r, max_results=%s", query, max_results)
    matches = repository.search(query, max_results)
    delivered = 0
    try:
        for book in matches:
            if delivered and delay > 0:
                await asyncio.sleep(delay)
            logger.info("Found book: %s", book.title)
            delivered += 1
            yield book
    except (asyncio.CancelledError, GeneratorExit):
        logger.info("SearchBooks stream for %r stopped after %d books", query, delivered)
        raise
    finally:
        matches.close()
