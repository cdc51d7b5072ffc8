import os
from pathlib import Path

from dotenv import load_dotenv

# Optional .env next to the package root; real environment variables win.
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        return default


class Settings:
    def __init__(self) -> None:
        self.SEARCH_DELAY_MS: int = _as_int(os.getenv("SEARCH_DELAY_MS"), 300)
        self.SEED_SAMPLE_BOOKS: bool = _as_bool(os.getenv("SEED_SAMPLE_BOOKS"), True)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def search_delay(self) -> float:
        """Per-item SearchBooks pause in seconds."""
        return max(self.SEARCH_DELAY_MS, 0) / 1000.0


settings = Settings()
