from __future__ import annotations

from typing import Any

import pytest

from core.config import AppSettings
from core.domain.models import Blueprint, BlueprintMetadata, BlueprintOption, ParsedOptions
from core.services.catalog import InMemoryCatalog


class FakeSelector:
    def __init__(self, *answers: str) -> None:
        self.answers = list(answers)
        self.calls = 0

    async def select(self) -> str:
        self.calls += 1
        return self.answers.pop(0)


class RecordingExecution:
    def __init__(self, runs: list[tuple[str, ParsedOptions]], blueprint: Blueprint) -> None:
        self._runs = runs
        self.blueprint = blueprint

    async def execute(self, options: ParsedOptions) -> None:
        self._runs.append((self.blueprint.name, dict(options)))


class ExecutionRecorder:
    """Execution factory that records `(blueprint name, options)` per run."""

    def __init__(self) -> None:
        self.runs: list[tuple[str, ParsedOptions]] = []

    def __call__(self, blueprint: Blueprint) -> RecordingExecution:
        return RecordingExecution(self.runs, blueprint)


def make_catalog(*entries: dict[str, Any]) -> InMemoryCatalog:
    catalog = InMemoryCatalog()
    for entry in entries:
        entry = dict(entry)
        metadata = BlueprintMetadata(
            tag=entry.pop("tag", None),
            is_active=entry.pop("active", True),
            reason=entry.pop("reason", None),
        )
        entry["options"] = [BlueprintOption(**opt) for opt in entry.get("options", [])]
        catalog.add(Blueprint(**entry), metadata)
    return catalog


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        cli_bin="bp",
        cli_name="bp",
        cli_description="Test CLI",
        cli_version="2.0.0",
        blueprint_paths=[],
        _env_file=None,
    )


@pytest.fixture
def catalog() -> InMemoryCatalog:
    return make_catalog(
        {"name": "api", "description": "Generate API"},
        {"name": "legacy", "description": "Old gen", "active": False},
        {
            "name": "deploy",
            "description": "Deploy the service",
            "tag": "beta",
            "options": [
                {"name": "env", "type": "string", "required": True, "askable": False},
                {"name": "token", "type": "string", "required": True, "askable": True},
                {"name": "replicas", "type": "integer"},
                {"name": "dry-run", "type": "boolean"},
            ],
        },
    )


@pytest.fixture
def recorder() -> ExecutionRecorder:
    return ExecutionRecorder()


def invoke(group, args: list[str], capsys) -> tuple[int, str]:
    """Run the built group like the `bp` script; return exit code and output."""

    with pytest.raises(SystemExit) as excinfo:
        group.main(args=list(args), prog_name="bp")
    captured = capsys.readouterr()
    return excinfo.value.code or 0, captured.out + captured.err
