"""Staybook settings.

Values come from, highest priority first: the process environment, the
file named by STAYBOOK_ENV_FILE, config/.env.dev, config/.env, and the
defaults declared on ``Settings``.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Walk up from this file to the first directory that looks like the repo."""
    here = Path(__file__).resolve()
    for candidate in here.parents:
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[2]


def get_config_dir() -> Path:
    """Get the config directory path (.env files, signing keys)."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get("STAYBOOK_ENV_FILE")
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    for name in (".env.dev", ".env"):
        candidate = get_config_dir() / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration; field names map to upper-case env variables."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required, also when running on SQLite
    postgres_password: SecretStr

    # Application
    app_name: str = "Staybook"
    debug: bool = False

    # Database (POSTGRES_ prefix)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "staybook"
    # When set, a local SQLite file replaces PostgreSQL (demos, tests)
    sqlite_path: str | None = None

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # Empty = no CORS allowed (secure default)

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(origin) for origin in value)
        return str(value) if value else ""

    # JWT signing key (RSA, PEM). Path wins over the inline value.
    jwt_private_key_path: Path | None = None
    jwt_private_key: SecretStr | None = None
    jwt_private_key_password: SecretStr | None = None
    # Development only: sign with a throwaway key generated at startup
    jwt_allow_ephemeral_key: bool = False

    # JWT claims
    jwt_token_expire_seconds: int = 3600
    jwt_issuer: str = "staybook"

    # Password hashing (bcrypt work factor)
    password_hash_rounds: int = 12

    # Customer statistics
    passport_expiry_horizon_months: int = 6

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Computed properties
    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL; SQLite when ``sqlite_path`` is set."""
        if self.sqlite_path:
            return f"sqlite+aiosqlite:///{self.sqlite_path}"
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        origins = (o.strip() for o in self.api_cors_origins.split(","))
        return [o for o in origins if o]

    @property
    def database_type(self) -> str:
        return "sqlite" if self.sqlite_path else "postgresql"


@lru_cache()
def get_settings() -> Settings:
    """Settings singleton; raises if POSTGRES_PASSWORD is not configured."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
