"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Service
    app_name: str = "Islamic Services API"
    app_version: str = "2.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CORS (public, read-only API)
    cors_allow_origins: list[str] = ["*"]

    # Rate limiting (per client IP)
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"  # or redis://host:6379/0
    general_rate_limit: str = "200 per 15 minutes"
    calculation_rate_limit: str = "30/minute"
    hourly_rate_limit: str = "1000/hour"

    # Request monitoring (logging only)
    monitor_requests: bool = True
    rapid_request_threshold: int = 10
    rapid_request_window_seconds: float = 10.0

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
