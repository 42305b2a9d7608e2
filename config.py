"""Configuration management for link locker."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=3000,
        description="Port to listen on"
    )

    base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL used for short links when the request carries no host"
    )

    # Storage settings
    links_file: str = Field(
        default="links.json",
        description="Path of the JSON document holding the code -> target mapping"
    )

    # Link settings
    short_code_length: int = Field(
        default=7,
        ge=1,
        description="Length of generated short codes"
    )

    wait_seconds: int = Field(
        default=15,
        ge=1,
        description="Countdown shown on the interstitial page before release"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
