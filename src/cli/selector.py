"""Interactive blueprint selection.

Every blueprint is listed, inactive ones included, so users can see what
exists and why it cannot run; only active entries can be picked, by number
or by name.
"""

from __future__ import annotations

from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape

from cli.ui_components import UNAVAILABLE, build_blueprints_table
from core.errors import NoActiveBlueprintError
from core.interfaces.catalog import BlueprintCatalog


class InteractiveSelector:
    def __init__(
        self,
        catalog: BlueprintCatalog,
        *,
        console: Console | None = None,
        prompt: Callable[..., Any] = typer.prompt,
    ) -> None:
        self._catalog = catalog
        self._console = console or Console()
        self._prompt = prompt

    async def select(self) -> str:
        entries = [(b, self._catalog.get_blueprint_metadata(b)) for b in self._catalog.get_blueprints()]
        if not any(metadata.is_active for _, metadata in entries):
            raise NoActiveBlueprintError()

        self._console.print(build_blueprints_table(entries, numbered=True, title="Select blueprint"))

        by_name = {blueprint.name: index for index, (blueprint, _) in enumerate(entries)}
        while True:
            answer = str(self._prompt("Blueprint")).strip()

            if answer.isdigit() and 1 <= int(answer) <= len(entries):
                index = int(answer) - 1
            elif answer in by_name:
                index = by_name[answer]
            else:
                self._console.print(f"[yellow]No blueprint matches {escape(repr(answer))}.[/yellow]")
                continue

            blueprint, metadata = entries[index]
            if not metadata.is_active:
                self._console.print(
                    f"[yellow]{blueprint.name} is {escape(metadata.reason or UNAVAILABLE)}, pick another one.[/yellow]"
                )
                continue
            return blueprint.name
