"""Configuration management using Pydantic Settings"""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Tool catalog (None = packaged data/tools.json)
    tool_catalog_path: Path | None = None

    # Service
    service_name: str = "tool-rental"
    log_level: str = "INFO"


settings = Settings()
