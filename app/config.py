"""
app/config.py — Central configuration loaded from environment variables.
All modules import settings from here; never read os.environ directly elsewhere.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Service ───────────────────────────────────────────────────────────────
    app_name: str = Field(
        default="intake-qualification-service",
        description="Service name reported by the health endpoint",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level for the API and scripts",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser",
    )

    # ── Qualification policy ──────────────────────────────────────────────────
    qualified_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Minimum overall score (0–100) for an intake form to be marked qualified",
    )

    # ── Batch scoring ─────────────────────────────────────────────────────────
    max_batch_size: int = Field(
        default=100,
        gt=0,
        description="Max intake forms accepted in one batch scoring request",
    )


# Singleton — import this everywhere
settings = Settings()
