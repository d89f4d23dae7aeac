"""
Configuration helpers for the VitaApp backend.

Routers/services never read os.environ directly: they receive a Settings
object, either the cached one from get_settings() or an explicit instance
handed to create_app() (tests point it at a temporary directory).
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_dir: Path
    profile_path: Path
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "4000"), 4000),
        data_dir=_path(os.getenv("VITA_DATA_DIR"), PROJECT_ROOT / "data"),
        profile_path=_path(os.getenv("VITA_PROFILE_PATH"), PROJECT_ROOT / "profile.json"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
