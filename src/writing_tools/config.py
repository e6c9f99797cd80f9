"""Configuration management for Writing Tools."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WT_",
    )

    # Tool server
    server_name: str = Field(default="writing-tools-mcp")
    tool_prefix: str = Field(default="wt_", description="Prepended to every tool name")

    # Manuscript decoding
    encoding: str = Field(default="utf-8", description="Codec used to decode manuscript files")

    # Logging
    log_level: str = Field(default="WARNING")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
