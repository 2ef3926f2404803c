"""
Configuration management for the Groceries API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GROCERIES_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # API Settings
    api_host: str = "0.0.0.0"
    # PORT is honoured for compatibility with common hosting platforms
    api_port: int = Field(
        default=3000, validation_alias=AliasChoices("GROCERIES_API_PORT", "PORT", "api_port")
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # Storage
    storage_backend: str = "memory"  # 'memory', 'file', 'sql'
    storage_path: str = "./data"
    database_url: str = "sqlite+aiosqlite:///./groceries.db"
    sql_echo: bool = False
    seed_data_path: str | None = None

    # Logging
    debug: bool = True
    log_level: str = "INFO"

    # Include a traceback in each GraphQL error entry
    expose_error_stack: bool = True


# Global settings instance
settings = Settings()
