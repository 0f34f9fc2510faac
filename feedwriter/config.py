"""
Library settings loaded from environment variables.

Uses pydantic-settings to validate and type-cast env vars on first use.
Every variable is prefixed with ``FEEDWRITER_`` (e.g. ``FEEDWRITER_LOG_LEVEL``).
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralised feedwriter configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FEEDWRITER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    # ── Atom view defaults ────────────────────────────────────────────
    atom_feed_title: str = "Feed"
    atom_feed_id: str = "urn:feedwriter:feed"
    atom_feed_link: str = ""
    atom_feed_subtitle: str = ""

    # ── CSV view defaults ─────────────────────────────────────────────
    csv_columns: str = "date,author"

    @property
    def csv_column_list(self) -> list[str]:
        """Parse comma-separated CSV columns into a list."""
        return [c.strip() for c in self.csv_columns.split(",") if c.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached singleton — settings are read once and reused.
    """
    return Settings()
