"""Application configuration from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MDCORPUS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Corpus
    content_dir: Path = Field(
        default=Path("source/_posts"),
        description="Directory holding the Markdown posts",
    )
    strict: bool = Field(
        default=False,
        description="Fail listing on malformed files instead of skipping them",
    )

    # HTTP API
    host: str = Field(default="127.0.0.1", description="Bind address for `serve`")
    port: int = Field(default=8000, ge=1, le=65535, description="Port for `serve`")
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
