"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking
  them into the dispatch logic.
- A single `AppSettings` instance is built at startup and handed to the
  command surface and discovery; nothing reads a global singleton.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.version import __version__


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "blueprint-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "blueprint-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "blueprint-cli"
    return Path.home() / ".config" / "blueprint-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _default_blueprint_paths() -> list[Path]:
    return [Path("blueprints"), get_user_config_dir() / "blueprints"]


class AppSettings(BaseSettings):
    """Central application settings."""

    model_config = SettingsConfigDict(
        env_prefix="BLUEPRINT_CLI_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    cli_bin: str = Field(
        default="bp",
        min_length=1,
        description="Program name shown in usage lines.",
    )
    cli_name: str = Field(
        default="blueprint-cli",
        min_length=1,
        description="Human name of the CLI.",
    )
    cli_description: str = Field(
        default="Discover and run blueprints.",
        description="Root help text.",
    )
    cli_version: str = Field(
        default=__version__,
        min_length=1,
        description="Version of the CLI front end, reported with the core version.",
    )

    blueprint_paths: list[Path] = Field(
        default_factory=_default_blueprint_paths,
        description="Directories scanned for `<name>/blueprint.json` manifests, in order.",
    )

    log_level: str = Field(
        default="WARNING",
        pattern=r"^(?i:debug|info|warning|error|critical)$",
        description="Logging level for the stderr handler.",
    )
