"""Configuration settings for codemood."""

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_config_dir() -> Path:
    """Get platform-specific default config directory."""
    app_name = "codemood"

    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        if not base:
            base = Path.home() / "AppData" / "Roaming"
        return Path(base) / app_name
    elif sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name
    else:
        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config_home:
            return Path(xdg_config_home) / app_name
        return Path.home() / ".config" / app_name


DEFAULT_IGNORE_DIRS = ("node_modules", ".git", "dist", "build", "coverage", "__pycache__", ".next")


class Settings(BaseSettings):
    """Application settings with support for .env files."""

    model_config = SettingsConfigDict(
        env_file=[
            get_default_config_dir() / ".env",
            ".env",
        ],
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="CODEMOOD_",
        extra="ignore",
    )

    max_scan_depth: int = Field(default=5, ge=0, description="Directory levels below the root to descend into")
    ignore_dirs: tuple[str, ...] = Field(
        default=DEFAULT_IGNORE_DIRS, description="Directory names that are never scanned (JSON list in env)"
    )
    max_file_bytes: int = Field(
        default=1_000_000, gt=0, description="Files larger than this are skipped instead of analyzed"
    )

    parallel_file_threshold: int = Field(
        default=10, description="Minimum number of files before using parallel processing"
    )
    max_parallel_workers: int = Field(default=6, ge=1, description="Maximum worker processes")

    debug_mode: bool = False


settings = Settings()
