# app_versioning/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "app-versioning"
    environment: Literal["dev", "test", "prod"] = "dev"
    version: str = "0.1.0"

    # --- Git storage ---
    git_root_path: str = Field("/data/git-storage", min_length=1)

    # --- Providers ---
    provider_timeout_seconds: float = Field(10.0, gt=0)
    github_api_url: str = "https://api.github.com"
    bitbucket_api_url: str = "https://api.bitbucket.org/2.0"

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
