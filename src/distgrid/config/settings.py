"""Environment-driven application settings.

All values are loaded from environment variables (prefix ``DISTGRID_``) or a
``.env`` file in the working directory.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReaderSettings(BaseSettings):
    """Stream reader behaviour."""

    model_config = SettingsConfigDict(env_prefix="DISTGRID_READER_")

    strict_tokens: bool = False
    """Reject tokens such as ``12abc`` instead of reading their leading integer."""


class TransformSettings(BaseSettings):
    """Distance transform tuning knobs."""

    model_config = SettingsConfigDict(env_prefix="DISTGRID_TRANSFORM_")

    worklist: Literal["lifo", "fifo", "random"] = "lifo"
    seed: int | None = Field(default=None, ge=0)
    """Seed for the ``random`` worklist discipline."""


class Settings(BaseSettings):
    """Top-level settings aggregator."""

    model_config = SettingsConfigDict(
        env_prefix="DISTGRID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    reader: ReaderSettings = Field(default_factory=ReaderSettings)
    transform: TransformSettings = Field(default_factory=TransformSettings)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    colour: bool = True
    """Style console output (headings in bold, faults in red)."""


# Module-level singleton — import and use directly.
settings = Settings()


def get_settings() -> Settings:
    """Return the module-level Settings singleton."""
    return settings
