"""
Application settings.

Values come from the environment or a project-level .env file.
"""
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent

load_dotenv(PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    """Runtime configuration for the tutor service."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "Tooth Trauma Tutor"
    version: str = "1.0.0"

    # Gemini
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.4

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None


settings = Settings()
