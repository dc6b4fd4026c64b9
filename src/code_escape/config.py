"""Runtime settings read from the environment.

Every setting is an environment variable prefixed with
``CODE_ESCAPE_`` (case insensitive), e.g. ``CODE_ESCAPE_LOG_LEVEL=debug``.
Command-line flags take precedence where both exist.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed configuration for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CODE_ESCAPE_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str | None = Field(
        default=None,
        description="Default logging level name when no -v flag is given.",
    )


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
