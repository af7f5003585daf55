"""
Configuration helpers for the Docket backend.

Routers/services read a Settings object instead of fetching os.environ
directly, so tests can swap the environment and clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_STORAGE_PATH = Path(__file__).resolve().parents[2] / "data" / "storage.json"
DEFAULT_STORAGE_KEY = "judiciaryCases"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_path: Path
    storage_key: str
    rollback_on_save_error: bool
    notice_ttl_ms: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    storage_path = (os.getenv("DOCKET_STORAGE_PATH") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_path=Path(storage_path) if storage_path else DEFAULT_STORAGE_PATH,
        storage_key=(os.getenv("DOCKET_STORAGE_KEY") or "").strip() or DEFAULT_STORAGE_KEY,
        rollback_on_save_error=_bool(os.getenv("DOCKET_ROLLBACK_ON_SAVE_ERROR"), True),
        notice_ttl_ms=max(0, _int(os.getenv("DOCKET_NOTICE_TTL_MS", "4000"), 4000)),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
