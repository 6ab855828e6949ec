# /app/core/config.py

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Runtime configuration, read from the environment and an optional `.env`
    file at the project root.
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "School Hub API"
    API_VERSION: str = "1.0.0"
    DATABASE_URL: str = "sqlite:///./schoolhub.db"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
