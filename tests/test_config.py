from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir
from core.version import __version__, core_version, format_version


def test_settings_read_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("BLUEPRINT_CLI_CLI_VERSION", "2.0.0")
    monkeypatch.setenv("BLUEPRINT_CLI_BLUEPRINT_PATHS", '["one", "two"]')
    monkeypatch.setenv("BLUEPRINT_CLI_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.cli_version == "2.0.0"
    assert settings.blueprint_paths == [Path("one"), Path("two")]
    assert settings.log_level == "debug"


def test_default_paths_include_user_config_dir(monkeypatch) -> None:
    monkeypatch.delenv("BLUEPRINT_CLI_BLUEPRINT_PATHS", raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.blueprint_paths[0] == Path("blueprints")
    assert settings.blueprint_paths[1] == get_user_config_dir() / "blueprints"


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(log_level="loud", _env_file=None)


def test_version_string_format() -> None:
    assert format_version("2.0.0", "1.4.2") == "2.0.0 (core 1.4.2)"
    assert format_version("2.0.0").startswith("2.0.0 (core ")
    assert core_version() == __version__
