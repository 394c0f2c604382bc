"""Configuration settings for the Sheet Bet Analytics dashboard."""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Google Sheets source
    default_sheet_url: str = (
        "https://docs.google.com/spreadsheets/d/1LleQLKL5oAoBPAITP_JcGkN4EBYLtLAbsJW8L8tSwaI"
        "/edit?gid=2017842059#gid=2017842059"
    )
    sheets_export_base_url: str = "https://docs.google.com/spreadsheets/d"
    fetch_timeout: float = 30.0

    # Table display
    page_size: int = 20

    # OpenRouter for AI analysis
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "google/gemini-2.0-flash-001"

    # Web dashboard
    web_host: str = "127.0.0.1"
    web_port: int = 8000

    # CSV export
    export_dir: str = "output"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
