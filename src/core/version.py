"""Version helpers.

The CLI front end and the dispatch core are versioned independently: the
CLI version comes from configuration, the core version from the installed
distribution.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"

DISTRIBUTION_NAME = "blueprint-cli"


def core_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return __version__


def format_version(cli_version: str, core: str | None = None) -> str:
    """`"2.0.0 (core 1.4.2)"`."""

    return f"{cli_version} (core {core if core is not None else core_version()})"
