from book_server.config import Settings


def test_defaults(monkeypatch):
    for name in ("SEARCH_DELAY_MS", "SEED_SAMPLE_BOOKS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.SEARCH_DELAY_MS == 300
    assert s.search_delay == 0.3
    assert s.SEED_SAMPLE_BOOKS is True
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_DELAY_MS", "50")
    monkeypatch.setenv("SEED_SAMPLE_BOOKS", "no")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings()
    assert s.search_delay == 0.05
    assert s.SEED_SAMPLE_BOOKS is False
    assert s.LOG_LEVEL == "DEBUG"


def test_negative_delay_is_clamped(monkeypatch):
    monkeypatch.setenv("SEARCH_DELAY_MS", "-10")
    assert Settings().search_delay == 0.0


def test_non_numeric_delay_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("SEARCH_DELAY_MS", "fast")
    s = Settings()
    assert s.SEARCH_DELAY_MS == 300
    assert s.search_delay == 0.3
