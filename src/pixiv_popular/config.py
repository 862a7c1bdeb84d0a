"""Configuration settings for Pixiv Popular."""

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_SITE_URL = "https://www.pixiv.net"
DEFAULT_LANGUAGE = "en"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Pixiv endpoints
    site_url: str = Field(default=DEFAULT_SITE_URL, description="Pixiv site root")
    language: str = Field(default=DEFAULT_LANGUAGE, description="Response and link language")

    # Logging
    log_level: str = Field(default="ERROR", description="Logging level")
    log_json: bool = Field(default=False, description="Emit logs as JSON")

    model_config = {
        "env_prefix": "PIXIV_POPULAR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
