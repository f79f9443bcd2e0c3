"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default, so the service starts with no environment at all
    - get_settings() is cached (lru_cache): single instance per process
    - DATABASE_URL, when set, wins over the DB_* parts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - URL built with URL.create: password is escaped, never string-formatted into the DSN
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    db_user: str = "postgres"
    db_host: str = "localhost"
    db_name: str = "users"
    db_password: str = "postgres"
    db_port: int = 5432
    database_url: str | None = None
    database_pool_size: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def sqlalchemy_url(self) -> str | URL:
        """Database URL for the async engine."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
