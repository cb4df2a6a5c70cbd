"""
Pipeline configuration.

Loaded from environment variables prefixed with PANEL_INDEX_ (or a .env
file). Command-line options take precedence over these values.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.index import DEFAULT_MIN_PANEL_VERSION


class Settings(BaseSettings):
    """Settings for the index build and the validation gate."""

    model_config = SettingsConfigDict(
        env_prefix="PANEL_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Directory holding one sub-directory per plugin
    plugins_dir: Path = Path("plugins")

    # Where the marketplace index is written
    output_file: Path = Path("plugins.json")

    # Used for entries whose manifest has no min_panel_version
    min_panel_version: str = DEFAULT_MIN_PANEL_VERSION

    # Root log level; --verbose lowers it to INFO
    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
