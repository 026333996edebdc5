"""Application configuration powered by Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, MongoDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Strongly typed application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    environment: Literal["dev", "staging", "prod"] = Field(default="dev")
    project_name: str = Field(default="AIS Map REST Service")
    version: str = Field(default="0.1.0")

    mongodb_url: MongoDsn
    mongodb_database: str = Field(default="ais_map", min_length=1)
    mongodb_collection: str = Field(default="position_reports", min_length=1)
    mongodb_ping_on_startup: bool = Field(default=True)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    cors_allowed_origins: list[str] = Field(default_factory=list)


@lru_cache
def get_settings() -> AppSettings:
    """Provide a cached singleton settings instance."""

    return AppSettings()
