from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # SQLAlchemy URL; file-backed SQLite by default, relative to the working dir
    database_url: str = "sqlite:///ski.db"

    # Connection pool bounds (ignored for in-memory SQLite)
    pool_size: int = 5
    max_overflow: int = 10

    # SQLite does not check foreign keys unless asked to.
    # Off by default: turns referencing unknown runs are accepted.
    enforce_foreign_keys: bool = False

    # Ground track stored for runs created through the API
    default_run_path: str = "M 0 50 C 25 25, 75 75, 100 50"

    # Vite dev server
    cors_origins: list[str] = ["http://localhost:5173"]

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Allow an empty env var to fall back to the default store
    @field_validator("database_url", mode="before")
    @classmethod
    def _empty_to_default(cls, v):
        if v in ("", None):
            return "sqlite:///ski.db"
        return v

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


settings = Settings()
