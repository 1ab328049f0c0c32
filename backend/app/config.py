"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Scheme prefixes mapped onto the driver each engine needs
_ASYNC_SCHEMES = {
    "postgres://": "postgresql+asyncpg://",
    "postgresql://": "postgresql+asyncpg://",
    "sqlite:///": "sqlite+aiosqlite:///",
}
_SYNC_SCHEMES = {
    "postgres://": "postgresql://",
    "postgresql+asyncpg://": "postgresql://",
    "sqlite+aiosqlite:///": "sqlite:///",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "StudyShare"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    # If database_url_override is set (e.g., for Neon with SSL), it takes precedence
    database_url_override: str | None = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "studyshare"
    postgres_password: str = ""
    postgres_db: str = "studyshare"
    # Create missing tables at startup instead of relying on Alembic (dev/test only)
    auto_create_tables: bool = False

    def _url_for(self, schemes: dict[str, str], driver: str) -> str:
        """Rewrite the configured URL onto the given driver scheme."""
        if not self.database_url_override:
            return (
                f"{driver}://{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        url = self.database_url_override
        for prefix, replacement in schemes.items():
            if url.startswith(prefix):
                return replacement + url[len(prefix):]
        return url

    @computed_field
    @property
    def database_url(self) -> str:
        """Async URL for the application engine (asyncpg, or aiosqlite in tests)."""
        url = self._url_for(_ASYNC_SCHEMES, "postgresql+asyncpg")
        # asyncpg rejects libpq query params such as sslmode
        if url.startswith("postgresql+asyncpg://"):
            url = url.split("?")[0]
        return url

    @computed_field
    @property
    def database_url_sync(self) -> str:
        """Sync URL for Alembic (psycopg2)."""
        return self._url_for(_SYNC_SCHEMES, "postgresql")

    # Auth / JWT
    jwt_secret_key: str  # Required - no default, must be set in .env
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7 days

    # Passwords
    bcrypt_rounds: int = 12
    # Registration currently accepts role="admin" from the request body
    allow_admin_registration: bool = True

    # Listing
    default_page_size: int = 10
    max_page_size: int = 100

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
