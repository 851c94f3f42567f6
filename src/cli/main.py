"""Entry point of the `bp` command.

Startup order:
1. settings (pydantic-settings) and logging;
2. blueprint discovery, under a status spinner;
3. option-type registry, selector, dispatcher;
4. command surface, then typer parses argv.

Everything is built once per process from an explicit `AppSettings`.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from functools import partial
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer.core import TyperGroup

from adapters.blueprint_discovery import BlueprintDiscovery
from adapters.blueprint_executor import BlueprintExecutor
from cli.selector import InteractiveSelector
from cli.surface import CommandSurfaceBuilder
from core.config import AppSettings
from core.errors import BlueprintCliError
from core.interfaces.catalog import BlueprintCatalog
from core.interfaces.execution import BlueprintSelector, ExecutionFactory
from core.parameters import ParameterRegistry, default_registry
from core.services.catalog import InMemoryCatalog
from core.services.dispatcher import Dispatcher

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False, rich_tracebacks=False)],
        force=True,
    )


async def discover_blueprints(settings: AppSettings) -> InMemoryCatalog:
    with _err_console.status("[magenta]Evaluating available blueprints...[/magenta]"):
        return await BlueprintDiscovery(settings.blueprint_paths).discover()


def build_cli(
    settings: AppSettings,
    catalog: BlueprintCatalog,
    registry: ParameterRegistry | None = None,
    *,
    selector: BlueprintSelector | None = None,
    execution_factory: ExecutionFactory | None = None,
    console: Console | None = None,
) -> TyperGroup:
    """Wire catalog, registry, selector and executor into the root group."""

    registry = registry or default_registry()
    console = console or _console
    dispatcher = Dispatcher(
        catalog,
        selector or InteractiveSelector(catalog, console=console),
        execution_factory or partial(BlueprintExecutor, registry=registry, console=console),
    )
    return CommandSurfaceBuilder(settings, catalog, registry, dispatcher.dispatch, console=console).build()


def run(argv: Sequence[str] | None = None) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level)

    try:
        catalog = asyncio.run(discover_blueprints(settings))
        group = build_cli(settings, catalog)
        group.main(
            args=list(argv) if argv is not None else sys.argv[1:],
            prog_name=settings.cli_bin,
        )
    except BlueprintCliError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(1)
