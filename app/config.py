"""Configuration management using Pydantic Settings."""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Log Management System"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS (the Streamlit UI usually runs on another port)
    cors_allow_origins: list[str] = ["*"]

    # Load the sample entries into the in-memory store on startup
    seed_sample_logs: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
