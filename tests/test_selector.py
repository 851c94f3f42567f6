from __future__ import annotations

import asyncio
import io

import pytest
from rich.console import Console

from cli.selector import InteractiveSelector
from conftest import make_catalog
from core.errors import NoActiveBlueprintError


def _scripted(*answers: str):
    remaining = list(answers)
    asked: list[str] = []

    def prompt(text: str) -> str:
        asked.append(text)
        return remaining.pop(0)

    return prompt, asked


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_lists_every_blueprint_and_marks_inactive(catalog) -> None:
    console, buffer = _console()
    prompt, _ = _scripted("api")

    chosen = asyncio.run(InteractiveSelector(catalog, console=console, prompt=prompt).select())

    output = buffer.getvalue()
    assert chosen == "api"
    for name in ("api", "legacy", "deploy"):
        assert name in output
    assert "unavailable" in output
    assert "beta" in output


def test_inactive_entry_cannot_be_chosen(catalog) -> None:
    console, buffer = _console()
    # "2" is legacy (inactive), then by name, then a valid pick.
    prompt, asked = _scripted("2", "legacy", "1")

    chosen = asyncio.run(InteractiveSelector(catalog, console=console, prompt=prompt).select())

    assert chosen == "api"
    assert len(asked) == 3
    assert "pick another one" in buffer.getvalue()


def test_unknown_answer_asks_again(catalog) -> None:
    console, buffer = _console()
    prompt, _ = _scripted("99", "nope", "deploy")

    chosen = asyncio.run(InteractiveSelector(catalog, console=console, prompt=prompt).select())

    assert chosen == "deploy"
    assert "No blueprint matches" in buffer.getvalue()


def test_reason_is_shown_for_disabled_entries() -> None:
    catalog = make_catalog(
        {"name": "api", "description": "Generate API"},
        {"name": "old", "description": "Old", "active": False, "reason": "needs core 2.x"},
    )
    console, buffer = _console()
    prompt, _ = _scripted("api")

    asyncio.run(InteractiveSelector(catalog, console=console, prompt=prompt).select())

    assert "needs core 2.x" in buffer.getvalue()


@pytest.mark.parametrize(
    "entries",
    [
        (),
        ({"name": "legacy", "description": "Old gen", "active": False},),
    ],
)
def test_no_active_blueprint_is_an_error(entries) -> None:
    console, _ = _console()
    prompt, asked = _scripted()

    with pytest.raises(NoActiveBlueprintError):
        asyncio.run(InteractiveSelector(make_catalog(*entries), console=console, prompt=prompt).select())
    assert asked == []
