"""Application configuration from environment."""
from functools import lru_cache

from pydantic_settings import BaseSettings

DEFAULT_SECRET_KEY = "change-me-in-production-use-env"


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Task Manager API"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Database
    database_url: str = "sqlite:///./tasks.db"

    # JWT signing; token lifetime is fixed in app.core.security
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def uses_default_secret(self) -> bool:
        return self.secret_key == DEFAULT_SECRET_KEY


@lru_cache
def get_settings() -> Settings:
    return Settings()
