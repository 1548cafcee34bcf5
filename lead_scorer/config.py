"""
lead_scorer/config.py — Central configuration loaded from environment variables.
All modules import settings from here; never read os.environ directly elsewhere.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── LLM ──────────────────────────────────────────────────────────────────
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key. Leave unset to score with the local fallback classifier.",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        description="Chat model used for intent classification",
    )
    openai_base_url: str | None = Field(
        default=None,
        description="Optional OpenAI-compatible endpoint (e.g. https://openrouter.ai/api/v1)",
    )
    ai_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    ai_max_tokens: int = Field(default=150, gt=0)
    ai_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout for the classification call",
    )
    ai_max_retries: int = Field(
        default=0,
        ge=0,
        description="Client-level retries; a failed call falls back instead of retrying",
    )

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Log level for CLI runs")


# Singleton — import this everywhere
settings = Settings()
