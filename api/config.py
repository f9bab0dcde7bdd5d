"""FastAPI application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("URBANFOOD_ALLOWED_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="URBANFOOD_")

    # App info
    app_name: str = "UrbanFood Catalog API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_path: Path = Path(__file__).parent.parent / "data" / "urbanfood.duckdb"

    # CORS - configurable via URBANFOOD_ALLOWED_ORIGINS
    cors_origins: list[str] = _parse_cors_origins()

    # Pagination
    default_page_size: int = 9
    max_page_size: int = 100

    # Cache
    cache_ttl_seconds: int = 300


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
