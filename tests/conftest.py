import pytest
from fastapi.testclient import TestClient

from book_server.catalog.store import BookRepository
from book_server.config import Settings
from book_server.main import create_app


@pytest.fixture
def repo() -> BookRepository:
    return BookRepository.with_sample_books()


@pytest.fixture
def fast_settings(monkeypatch) -> Settings:
    monkeypatch.setenv("SEARCH_DELAY_MS", "0")
    monkeypatch.setenv("SEED_SAMPLE_BOOKS", "true")
    return Settings()


@pytest.fixture
def client(fast_settings):
    app = create_app(fast_settings)
    with TestClient(app) as c:
        yield c
