"""Gatehouse settings.

Every option can be set through an environment variable of the same name
(case-insensitive). Values not present in the environment are read from
the first existing file of:

- the path in GATEHOUSE_ENV_FILE (relative paths start at the project root)
- config/.env.dev
- config/.env
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

THIRTY_DAYS_SECONDS = 30 * 24 * 60 * 60
ENV_FILE_VARIABLE = "GATEHOUSE_ENV_FILE"
ENV_FILE_NAMES = (".env.dev", ".env")


def _project_root() -> Path:
    """Nearest ancestor holding a config/ directory or a git checkout."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / ".git").is_dir():
            return candidate
    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Directory that holds the .env files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    candidates: list[Path] = []

    override = os.environ.get(ENV_FILE_VARIABLE)
    if override:
        path = Path(override)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    candidates.extend(get_config_dir() / name for name in ENV_FILE_NAMES)

    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Options for the session engine, its cookies and its database.

    Environment variables win over the .env file, which wins over the
    defaults below.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Gatehouse"
    testing: bool = False  # Skips session id regeneration on login

    # Session authentication
    session_identity_field: str = "user_id"
    allow_remembering: bool = True
    remember_length: int = Field(default=THIRTY_DAYS_SECONDS, gt=0)
    remember_cookie_name: str = "remember"
    rotate_remember_tokens: bool = True
    remember_purge_probability: float = Field(default=0.2, ge=0.0, le=1.0)

    # Cookies
    cookie_domain: str | None = None
    cookie_path: str = "/"
    cookie_prefix: str = ""
    cookie_secure: bool = True
    cookie_samesite: Literal["lax", "strict", "none"] = "lax"

    # Requests
    trust_proxy_headers: bool = False

    # Password hashing
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "gatehouse"

    # Logging
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured PostgreSQL database."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the loaded settings so the next call reads them again."""
    get_settings.cache_clear()
