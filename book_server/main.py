# book_server/main.py
"""
FastAPI application entry point.

Run with: uvicorn book_server.main:app --reload
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request

from .catalog import catalog_router
from .catalog.store import BookRepository
from .config import Settings, settings as default_settings


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and the repository it owns.

    The repository lives on ``app.state`` for the lifetime of the app
    and is handed to route handlers through a dependency.
    """
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Book Catalog Service",
        description=(
            "In-memory book catalogue: lookup by id, listing, category "
            "filter, streamed search and creation."
        ),
        version="1.0.0",
    )

    if settings.SEED_SAMPLE_BOOKS:
        app.state.repository = BookRepository.with_sample_books()
    else:
        app.state.repository = BookRepository()
    app.state.search_delay = settings.search_delay

    app.include_router(catalog_router)

    @app.get("/")
    def root():
        return {"status": "ok", "service": "book-catalog"}

    @app.get("/health")
    def health(request: Request):
        """Health check endpoint."""
        return {"status": "healthy", "total_books": request.app.state.repository.count()}

    return app


app = create_app()
