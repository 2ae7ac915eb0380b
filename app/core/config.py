# app/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    All values have defaults, so no .env is required to boot.

    Optional env vars (.env):
      - API_V1_STR (route prefix, empty = serve at root)
      - DATA_DIR (directory holding the *.json catalog files)
      - DEFAULT_LIMIT (page size when `limit` is absent or invalid)
      - LOG_LEVEL
    """

    PROJECT_NAME: str = "Mock Catalog API"
    API_V1_STR: str = ""

    # Static catalog
    DATA_DIR: Path = BASE_DIR / "data"
    DEFAULT_LIMIT: int = 30

    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
