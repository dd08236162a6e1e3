"""Configuration handling for the Stellaria client."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEMO_API_KEY = "DEMO_KEY"


class Settings(BaseSettings):
    """Client configuration loaded from environment variables."""

    api_token: str = Field(
        default=DEMO_API_KEY,
        validation_alias=AliasChoices("API_TOKEN", "NASA_API_KEY"),
    )
    nasa_base_url: str = "https://api.nasa.gov"
    http_timeout_seconds: float = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
