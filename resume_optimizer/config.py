"""
Configuration management for Resume Optimizer.
"""

import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM
    deepseek_api_key: str = ""
    llm_model: str = "deepseek-chat"
    llm_temperature: float = 0.1

    # Scraping
    firecrawl_api_key: str = ""
    scrape_timeout: float = 30.0
    max_job_description_chars: int = 10000

    # Observability
    langsmith_api_key: str = ""
    langsmith_tracing: bool = True

    # Pipeline settings
    max_keywords: int = 5
    max_resume_chars: int = 12000
    graph_recursion_limit: int = 25

    # API
    optimize_rate_limit: str = "10/minute"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra env vars


settings = Settings()


def configure_tracing(settings: Settings) -> bool:
    """Export LangSmith settings for LangChain. Returns whether tracing is on."""
    enabled = bool(settings.langsmith_api_key) and settings.langsmith_tracing
    if settings.langsmith_api_key:
        os.environ["LANGSMITH_API_KEY"] = settings.langsmith_api_key
    os.environ["LANGSMITH_TRACING"] = "true" if enabled else "false"
    return enabled
