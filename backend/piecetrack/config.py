from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "PieceTrack API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./piecetrack.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Legacy relational database (one-off migration source)
    legacy_database_url: str = "sqlite:///./asignacion.db"

    # Listings & reports
    default_page_size: int = 10
    max_page_size: int = 100
    finalized_status_marker: str = "final"
    missing_reference_placeholder: str = "-"
    report_title: str = "Pieces report"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_migration: str = "INFO"        # legacy migration run
    log_level_reports: str = "INFO"          # report building and PDF export

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
