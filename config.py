"""Configuration management for shortlinks."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Database settings
    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL. Unset = in-memory store (links are lost on restart)"
    )

    db_pool_max_size: int = Field(
        default=10,
        ge=1,
        description="Maximum size of the database connection pool"
    )

    create_tables: bool = Field(
        default=False,
        description="Create the short_links table on startup if missing"
    )

    # Redis settings (optional)
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL for caching"
    )

    cache_ttl_seconds: int = Field(
        default=3600,
        description="Cache TTL in seconds"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    # Short link settings
    base_url: str = Field(
        default="http://localhost:9200",
        description="Origin used for short URLs when the request does not provide one"
    )

    short_code_length: int = Field(
        default=7,
        ge=1,
        le=32,
        description="Length of generated short codes"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=0,
        description="Extra attempts when a generated short code is already taken"
    )

    recent_links_limit: int = Field(
        default=20,
        ge=1,
        description="How many of a visitor's links the home page remembers"
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
