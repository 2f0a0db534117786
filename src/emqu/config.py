"""Application configuration from environment variables."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_cache_dir() -> Path:
    """Well-known local cache folder for downloaded models."""
    base = os.environ.get("XDG_CACHE_HOME")
    return (Path(base) if base else Path.home() / ".cache") / "emqu-models"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="EMQU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Embedding model
    embedding_backend: Literal["local", "openai"] = Field(
        default="local",
        description="local (sentence-transformers) or openai (OpenAI-compatible API)",
    )
    embedding_model: str = Field(
        default="sentence-transformers/all-MiniLM-L6-v2",
        description="Embedding model name",
    )
    model_cache_dir: Path = Field(
        default_factory=default_cache_dir,
        description="Cache folder for local models",
    )

    # Embedding API (OpenAI compatible)
    embedding_api_url: str = Field(
        default="https://api.openai.com/v1",
        description="OpenAI-compatible embedding API URL",
    )
    embedding_api_key: str = Field(default="", description="Embedding API key")

    # Chunking
    tokenizer_encoding: str = Field(
        default="cl100k_base",
        description="tiktoken encoding used to size chunks",
    )
    chunk_max_tokens: int = Field(default=1000, gt=0, description="Maximum tokens per chunk")

    # Application
    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
