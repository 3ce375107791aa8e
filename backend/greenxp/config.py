# backend/greenxp/config.py
import os
from functools import lru_cache
from typing import MutableMapping, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DB_DRIVER = "postgresql+psycopg"

# Settings fields that say where the database lives
DB_FIELDS = frozenset({"DATABASE_URL", "DB_DRIVER", "DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME"})


def normalize_database_url(url: str) -> str:
    """Point bare postgres URLs at the psycopg 3 driver this project installs."""
    for scheme in ("postgres://", "postgresql://"):
        if url.startswith(scheme):
            return f"{DEFAULT_DB_DRIVER}://" + url[len(scheme):]
    return url


def map_platform_env(environ: MutableMapping[str, str] = os.environ) -> None:
    """Hosting platforms set DATABASE_URL and PORT without a prefix; map them
    to the GREENXP_-prefixed names that Settings reads."""
    if "DATABASE_URL" in environ and "GREENXP_DATABASE_URL" not in environ:
        environ["GREENXP_DATABASE_URL"] = normalize_database_url(environ["DATABASE_URL"])
    if "PORT" in environ and "GREENXP_PORT" not in environ:
        environ["GREENXP_PORT"] = environ["PORT"]


map_platform_env()


class Settings(BaseSettings):
    """Process configuration, read once at startup."""

    # Database
    DB_DRIVER: str = DEFAULT_DB_DRIVER
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "greenxp"
    DB_PASSWORD: str = ""
    DB_NAME: str = "greenxp"
    DB_POOL_SIZE: int = 100
    # Full URL; overrides the DB_* parts when set
    DATABASE_URL: Optional[str] = None

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="GREENXP_", env_file=".env", extra="ignore")

    @field_validator("DATABASE_URL")
    @classmethod
    def _known_driver(cls, v: Optional[str]) -> Optional[str]:
        return normalize_database_url(v) if v else v

    @property
    def database_configured(self) -> bool:
        """True when any database setting came from the environment or the .env file."""
        return bool(self.model_fields_set & DB_FIELDS)

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        auth = self.DB_USER
        if self.DB_PASSWORD:
            auth = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return f"{self.DB_DRIVER}://{auth}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
