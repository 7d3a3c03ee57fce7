"""Application settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # App
    APP_NAME: str = "Ask Gemini"
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=1, le=65535)

    # AI / LLM provider configuration
    # GEMINI_API_KEY is optional at startup; requests fail until it is set
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GENERATION_TIMEOUT_SECONDS: float = Field(default=60.0, gt=0)

    # Optional directory served under /static
    STATIC_DIR: str | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
