"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON lines")

    # Feature flags
    debug_mode: bool = Field(default=False, description="Show debug panel")
    enable_export: bool = Field(default=True, description="Offer CSV download of results")
    enable_chart: bool = Field(default=True, description="Show price/ROI chart")

    # Data
    catalog_path: Optional[str] = Field(
        default=None, description="JSON catalog file; bundled sample when unset"
    )

    # Presentation
    default_view_mode: Literal["grid", "list"] = Field(default="grid")
    assets_dir: Optional[str] = Field(default=None, description="Directory holding local listing images")
    grid_columns: int = Field(default=3, ge=1, le=6)

    model_config = {
        "env_prefix": "PROPBROWSER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
