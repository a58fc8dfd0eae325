"""
Configuration management for ResumeLM.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    deepseek_api_key: str = ""
    pro_model: str = "deepseek-chat"
    free_model: str = "deepseek-chat"
    ai_temperature: float = 0.7

    # Database
    database_url: str = ""

    # Subscription (True = demo build, every caller is treated as pro)
    force_pro_plan: bool = True

    # Rate limiting
    rate_limit_max: int = 10000
    rate_limit_window_ms: int = 6_000_000
    ai_route_limit: str | None = None  # Optional extra slowapi quota on /ai routes

    # Page cache
    page_cache_ttl: int = 300
    page_cache_size: int = 1024

    # API
    cors_origins: str = "http://localhost:3000"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()
