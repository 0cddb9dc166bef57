"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Limits and backend choices are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "apex"
    app_version: str = "0.1.0"
    debug: bool = False

    # Database (SQLAlchemy async URL; postgresql+asyncpg or sqlite+aiosqlite)
    database_url: str = "sqlite+aiosqlite:///./var/apex.sqlite"
    database_echo: bool = False
    # Optional pool overrides (None = use defaults in database.py; ignored for SQLite)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Storage
    storage_backend: str = "local"
    storage_root: str = "./storage"
    max_upload_size: int = 100 * 1024 * 1024  # 100MB

    # Reports
    max_report_content_length: int = 1_000_000

    # Create tables at startup (local and test runs; deployments use Alembic)
    create_schema_on_startup: bool = False

    # Content extraction (best-effort; never fails an upload)
    extraction_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage_and_limits(self) -> "Settings":
        """Validate storage backend and positive limits."""
        if self.storage_backend.lower() != "local":
            raise ValueError(
                f"storage_backend must be 'local', got: {self.storage_backend!r}"
            )
        if not self.storage_root:
            raise ValueError("STORAGE_ROOT is required for the local storage backend.")
        if not self.database_url:
            raise ValueError("DATABASE_URL is required. Set in environment or .env file.")
        for name in (
            "max_upload_size",
            "max_report_content_length",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings (one instance per process). Call cache_clear() in tests."""
    return Settings()
