"""
Notes API — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads environment variables (or a .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the application factory, the entry points and middleware.
When:  Loaded once at module import time.

Every value has a development default, so the service starts with no
environment at all: `PORT` defaults to 3001 and prebuilt front-end assets
are looked up in `./dist`.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern. Names are case-insensitive, so both
    `PORT` and `port` work.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # ── Static Assets ─────────────────────────────────────────────────────
    # What: Directory holding the prebuilt front-end (e.g. `npm run build` output)
    # Relative paths resolve against the process working directory.
    static_dir: str = Field(default="dist")

    # ── Notes ─────────────────────────────────────────────────────────────
    # What: Load the three demo notes when an application instance is built
    seed_notes: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated origins. Empty disables the CORS middleware
    # (the bundled front-end is served from the same origin).
    cors_origins: str = Field(default="")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list, dropping blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── API Docs ──────────────────────────────────────────────────────────
    # Off by default: /docs and /openapi.json would otherwise shadow the
    # "unknown endpoint" response for those paths.
    docs_enabled: bool = Field(default=False)

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, used whenever create_app() is not given explicit settings
settings = Settings()
