# medialibrary/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from medialibrary.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8080
    prefix: str = "/media-library"

    # comma separated so they can be set from a plain env var
    cors_allow_origins: str = "http://localhost:4200"
    cors_allow_methods: str = "GET,POST,PUT,DELETE,OPTIONS"
    cors_allow_headers: str = "*"
    cors_allow_credentials: bool = False

    # number of items per media type on the home page
    home_page_size: int = Field(10, ge=1, le=100)

    @field_validator("cors_allow_credentials", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    @property
    def origins(self) -> List[str]:
        return csv_to_list(self.cors_allow_origins)

    @property
    def methods(self) -> List[str]:
        return csv_to_list(self.cors_allow_methods)

    @property
    def headers(self) -> List[str]:
        return csv_to_list(self.cors_allow_headers)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "medialibrary"
    user: str = "medialibrary"
    password: str = "medialibrary"
    schema_name: str = "medialibrary"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    @computed_field  # type: ignore[misc]
    @property
    def composed_url(self) -> str:
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "medialibrary"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()

    # Optional single URL (if set, it takes precedence over the db.* parts)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")

    # -------- Alembic / migrations --------
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.composed_url

    @computed_field  # type: ignore[misc]
    @property
    def is_postgres(self) -> bool:
        return self.database_url.startswith("postgresql")

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        """Schema for our tables; only meaningful on PostgreSQL and never 'public'."""
        name = (self.db.schema_name or "").strip()
        if not self.is_postgres or not name or name.lower() == "public":
            return None
        return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from medialibrary.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
