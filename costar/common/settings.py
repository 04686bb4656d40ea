# costar/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    prefix: str = "/api"


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "costar"
    user: str = "costar"
    password: str = "costar"
    schema_name: str = Field(default="costar", alias="DB_SCHEMA")
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = None

    model_config = {"populate_by_name": True}

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class SearchConfig(BaseModel):
    """Knobs for the degrees-of-separation search."""
    default_max_degrees: int = Field(6, ge=0)
    max_degrees_limit: int = Field(12, ge=1, description="Upper bound accepted from callers")
    max_nodes_visited: int = Field(250_000, ge=1, description="Visited-node budget across both sides")
    time_budget_sec: float = Field(5.0, gt=0, description="Wall-clock budget per search")
    batch_size: int = Field(1000, ge=1, description="Max person ids per neighbor batch query")
    include_crew_edges: bool = False  # cast-only edges unless enabled

    @field_validator("include_crew_edges", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "costar"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # Single-URL override, e.g. DATABASE_URL=postgresql+psycopg://...
    database_url_env: Optional[str] = Field(default=None, validation_alias=AliasChoices("DATABASE_URL"))

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()
    search: SearchConfig = SearchConfig()

    # -------- Alembic / migrations --------
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_env or self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> str:
        return self.db.schema_name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from costar.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
