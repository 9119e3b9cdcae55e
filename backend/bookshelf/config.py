"""
Bookshelf Backend: Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the store, and the response layer.
When:  Loaded once at module import time.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults that reproduce the classic behaviour:
    listen on localhost:8080, serve pretty-printed JSON, start with the
    three seeded books.
    """

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="localhost")
    backend_port: int = Field(default=8080, ge=1024, le=65535)

    # What: Controls verbosity of application logging
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

    # ── Responses ─────────────────────────────────────────────────────────
    # What: Indentation of successful JSON bodies (0 = compact output)
    json_indent: int = Field(default=4, ge=0, le=8)

    # ── Catalogue ─────────────────────────────────────────────────────────
    # What: Whether the store starts with the three seed books
    # When false: the service starts with an empty shelf
    seed_catalog: bool = Field(default=True)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # BACKEND_PORT and backend_port both work
    }

    @property
    def bind_address(self) -> str:
        """host:port string used in startup log lines."""
        return f"{self.backend_host}:{self.backend_port}"


# Singleton instance - imported throughout the application
settings = Settings()
