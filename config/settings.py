"""Application configuration using pydantic-settings."""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration loaded from environment / .env file."""

    # ── Azure Developer CLI environment ───────────────────────────────────────
    # azd exports these to hooks; AZURE_LOCATION is only a hint for the
    # default region and is confirmed with the user before use.
    azure_env_name: str = Field(
        default="",
        description="azd environment name, used in resource group names (required)",
    )
    azure_location: str = Field(default="", description="Default region hint")

    # ── External tools ────────────────────────────────────────────────────────
    az_executable: str = Field(default="az")
    azd_executable: str = Field(default="azd")

    # ── Chat sample (Azure OpenAI on your data) ───────────────────────────────
    azure_openai_endpoint: str = Field(default="")
    azure_openai_api_key: str = Field(default="")
    azure_openai_deployment: str = Field(default="")
    azure_openai_api_version: str = Field(default="2024-10-21")
    azure_search_endpoint: str = Field(default="")
    azure_search_key: str = Field(default="")
    azure_search_index: str = Field(default="")
    sample_app_host: str = Field(default="127.0.0.1")
    sample_app_port: int = Field(default=8000)

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default="logs/provision.log")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
