"""Execution and selection contracts.

Rules:
- `execute` is async: a blueprint may prompt, write files or do network I/O.
- The dispatcher builds one execution per run through an
  `ExecutionFactory`, bound to the resolved blueprint.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import Blueprint, ParsedOptions


@runtime_checkable
class BlueprintExecution(Protocol):
    async def execute(self, options: ParsedOptions) -> None:
        """Run the bound blueprint with the parsed options."""

        ...


ExecutionFactory = Callable[[Blueprint], BlueprintExecution]


@runtime_checkable
class BlueprintSelector(Protocol):
    async def select(self) -> str:
        """Ask the user for a blueprint and return its name.

        Never returns the name of an inactive blueprint.
        """

        ...
