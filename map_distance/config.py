"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- MAPDIST_API_READ_KEY=...
- MAPDIST_API_READ_WRITE_KEY=...
- MAPDIST_SERVER_PORT=8080
- MAPDIST_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiConfig(BaseSettings):
    """HTTP API and permission configuration.

    Environment variables prefixed with MAPDIST_API_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPDIST_API_")

    prefix: str = "/api/map"
    key_header: str = "X-Api-Key"
    read_key: str = "FS_Read"
    read_write_key: str = "FS_ReadWrite"


class ServerConfig(BaseSettings):
    """Server configuration.

    Environment variables prefixed with MAPDIST_SERVER_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPDIST_SERVER_")

    host: str = "127.0.0.1"
    port: int = 8000


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with MAPDIST_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPDIST_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.api.read_key)
        print(config.server.port)

    Environment variables prefixed with MAPDIST_.
    """

    model_config = SettingsConfigDict(env_prefix="MAPDIST_")

    title: str = "Map Distance API"
    api: ApiConfig = Field(default_factory=ApiConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
