"""CLI UI components (Rich).

Why separate components:
- Keeps command wiring apart from visual details.
- The selection list and `--list` share the same blueprint table.
"""

from __future__ import annotations

from typing import Sequence

from rich.table import Table
from rich.text import Text

from core.domain.models import Blueprint, BlueprintMetadata

UNAVAILABLE = "unavailable"


def blueprint_label(blueprint: Blueprint, metadata: BlueprintMetadata) -> str:
    """`"[tag] description"`, or just the description when untagged."""

    tag = f"[{metadata.tag}] " if metadata.tag else ""
    return f"{tag}{blueprint.description}"


def build_blueprints_table(
    entries: Sequence[tuple[Blueprint, BlueprintMetadata]],
    *,
    numbered: bool = False,
    title: str = "Blueprints",
) -> Table:
    """Rich table with one row per blueprint; inactive rows are dimmed."""

    table = Table(title=title)
    if numbered:
        table.add_column("#", style="bold", justify="right", no_wrap=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Tag", style="grey50")
    table.add_column("Description", style="white")
    table.add_column("Status")

    for index, (blueprint, metadata) in enumerate(entries, start=1):
        if metadata.is_active:
            status = Text("available", style="green")
        else:
            status = Text(metadata.reason or UNAVAILABLE, style="red")
        row = [
            Text(blueprint.name),
            Text(metadata.tag or ""),
            Text(blueprint.description),
            status,
        ]
        if numbered:
            row.insert(0, Text(str(index)))
        table.add_row(*row, style=None if metadata.is_active else "dim")
    return table
