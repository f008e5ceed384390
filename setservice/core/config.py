"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every route is mounted under, e.g. "/v1".
        rate_limit_enabled: Limit /set calls per client. Off by default.
        rate_limit_default: Limit applied to each /set endpoint when enabled.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "setservice"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = ""
    rate_limit_enabled: bool = False
    rate_limit_default: str = "60/minute"


settings = Settings()
