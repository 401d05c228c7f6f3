"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class PageScanSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    service_name: str = "pagescan"

    # FastAPI
    http_host: str = "127.0.0.1"
    http_port: int = 3000

    # Page retrieval
    fetch_timeout_seconds: float = 15.0
    fetch_user_agent: str = "PageScan/0.1.0"
    max_page_bytes: int = 5 * 1024 * 1024  # 5MB

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate(self) -> None:
        if self.http_port <= 0:
            raise ValueError("http_port must be > 0")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError("fetch_timeout_seconds must be > 0")
        if self.max_page_bytes <= 0:
            raise ValueError("max_page_bytes must be > 0")
        if not self.fetch_user_agent.strip():
            raise ValueError("fetch_user_agent must not be empty")


_settings: PageScanSettings | None = None


def get_settings() -> PageScanSettings:
    global _settings
    if _settings is None:
        _settings = PageScanSettings()
        _settings.validate()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
