"""Tests for Settings: defaults, environment overrides, URL building."""

import pytest
from sqlalchemy.engine import URL

from users_api.config import Settings

_ENV_VARS = (
    "PORT", "HOST", "DB_USER", "DB_HOST", "DB_NAME", "DB_PASSWORD", "DB_PORT",
    "DATABASE_URL", "DATABASE_POOL_SIZE", "LOG_LEVEL", "LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.db_user == "postgres"
    assert s.db_host == "localhost"
    assert s.db_port == 5432
    assert s.database_url is None


def test_env_overrides_each_part(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("DB_HOST", "db.internal")
    clean_env.setenv("DB_PORT", "6543")
    clean_env.setenv("DB_NAME", "people")
    s = Settings(_env_file=None)
    assert s.port == 8080
    url = s.sqlalchemy_url()
    assert isinstance(url, URL)
    assert url.host == "db.internal"
    assert url.port == 6543
    assert url.database == "people"
    assert url.drivername == "postgresql+asyncpg"


def test_password_with_special_characters_is_kept_verbatim(clean_env):
    clean_env.setenv("DB_PASSWORD", "p@ss:w/rd")
    assert Settings(_env_file=None).sqlalchemy_url().password == "p@ss:w/rd"


def test_database_url_wins_over_parts(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    clean_env.setenv("DB_HOST", "ignored")
    assert Settings(_env_file=None).sqlalchemy_url() == "sqlite+aiosqlite://"


def test_plain_postgres_url_gets_async_driver(clean_env):
    clean_env.setenv("DATABASE_URL", "postgresql://u:p@h:5432/d")
    s = Settings(_env_file=None)
    assert s.database_url == "postgresql+asyncpg://u:p@h:5432/d"
