"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IecbibSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="IECBIB_",
    )

    # Catalog
    catalog_url: str = Field(
        default="https://webstore.iec.ch",
        description="Base URL of the IEC webstore",
    )
    timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP timeout in seconds",
    )
    max_connections: int = Field(
        default=3,
        ge=1,
        description="Maximum concurrent connections to the webstore",
    )
    user_agent: str = Field(
        default="iecbib/0.1",
        description="User-Agent header sent to the webstore",
    )

    # App settings
    host: str = Field(
        default="127.0.0.1",
        description="Interface the API server binds to",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the API server listens on",
    )
    debug: bool = Field(
        default=False,
        description="Return tracebacks from the API and reload the server on changes",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> IecbibSettings:
    """Get cached settings instance."""
    return IecbibSettings()
