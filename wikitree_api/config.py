"""Client configuration using Pydantic Settings."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.wikitree.com/api.php"


class ApiSettings(BaseSettings):
    """WikiTree API server settings."""

    model_config = SettingsConfigDict(
        env_prefix="WIKITREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    app_id: str = "wikitree-api-python"
    show_urls: bool = False

    # Optional login used by run_ancestors.py
    email: Optional[str] = None
    password: Optional[str] = None


class Settings(BaseSettings):
    """Main package settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    api: ApiSettings = ApiSettings()


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Send package log records to stderr at the configured level."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
