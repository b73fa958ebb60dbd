"""
Configuration helpers for the user records API.

Routers, scripts and the app factory read the environment through
`get_settings()` instead of touching os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_STORAGE_PATH = "data/user.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    project_dir: Path
    storage_path: str
    default_page_size: int
    max_page_size: int
    log_level: str

    @property
    def resolved_storage_path(self) -> Path:
        path = Path(self.storage_path)
        if path.is_absolute():
            return path
        return self.project_dir / path


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int) -> int:
        try:
            parsed = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return default
        return parsed if parsed > 0 else default

    project_dir = os.getenv("PROJECT_DIR", "").strip()
    default_page_size = _int(os.getenv("PAGE_SIZE_DEFAULT"), 10)
    max_page_size = max(_int(os.getenv("PAGE_SIZE_MAX"), 100), default_page_size)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        project_dir=Path(project_dir) if project_dir else PROJECT_ROOT,
        storage_path=(os.getenv("USER_STORAGE_PATH") or DEFAULT_STORAGE_PATH).strip(),
        default_page_size=default_page_size,
        max_page_size=max_page_size,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
