"""Configuration management using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # AnkiConnect API
    anki_connect_url: str = Field(
        default="http://localhost:8765", description="AnkiConnect API endpoint"
    )
    anki_connect_version: int = Field(default=6, description="AnkiConnect API version")
    anki_connect_timeout: float = Field(
        default=30.0, gt=0, description="Timeout for a single AnkiConnect request in seconds"
    )

    # Cards created with add_card
    default_deck: str = Field(default="Default", description="Deck for new cards")
    default_model: str = Field(
        default="Basic", description="Note type for new cards (needs Front and Back fields)"
    )

    # Logging
    debug: bool = Field(default=False, description="Enable debug logging")


# Global settings instance
settings = Settings()
