"""Configuration management for the glossary sync service."""

from typing import Dict, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # DeepL
    deepl_api_key: Optional[str] = Field(None, description="DeepL auth key, ':fx' suffix selects the free API")
    deepl_server_url: Optional[str] = Field(None, description="Override for the DeepL API base URL")
    deepl_timeout: float = Field(30.0, description="Timeout in seconds for DeepL requests")

    # Site / records
    site_languages: Dict[int, str] = Field(
        default_factory=lambda: {0: "de"},
        description="Language id to ISO code, id 0 is the default language",
    )
    records_file: Optional[str] = Field(None, description="JSON file used to seed the record store")

    # API Configuration
    api_host: str = Field("0.0.0.0")
    api_port: int = Field(8000)
    log_level: str = Field("INFO")


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the application settings."""
    return settings
