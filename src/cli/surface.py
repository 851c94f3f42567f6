"""Dynamic command surface.

The root program is a typer app; each discovered blueprint is appended to
its command group as a `TyperCommand` whose flags come from the blueprint's
declared options. Commands and options are typer's own classes, so the
parser reports missing or invalid values itself:

- `--name <name>` when the option type needs an argument, `--name` otherwise;
- mandatory only for required options that cannot be asked for later;
- coerced by the option type's validator (a `ValueError` becomes a
  usage error, exit code 2).

Every action ends in the dispatcher: `dispatch(name, options)` for a
subcommand, `dispatch(None, {})` for the bare root command.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer
from rich.console import Console
from typer.core import TyperCommand, TyperGroup, TyperOption

from cli.ui_components import blueprint_label, build_blueprints_table
from core.config import AppSettings
from core.domain.models import Blueprint, BlueprintOption, CliOptionDescriptor, ParsedOptions
from core.interfaces.catalog import BlueprintCatalog
from core.parameters import ParameterRegistry
from core.version import format_version

DispatchFn = Callable[[str | None, ParsedOptions], Awaitable[None]]


class CommandSurfaceBuilder:
    def __init__(
        self,
        settings: AppSettings,
        catalog: BlueprintCatalog,
        registry: ParameterRegistry,
        dispatch: DispatchFn,
        *,
        console: Console | None = None,
    ) -> None:
        self._settings = settings
        self._catalog = catalog
        self._registry = registry
        self._dispatch = dispatch
        self._console = console or Console()

    def build(self) -> TyperGroup:
        """Build the root group with one subcommand per blueprint.

        Raises `UnknownOptionTypeError` when a blueprint declares an option
        type the registry does not know.
        """

        group = typer.main.get_group(self._build_root())
        for blueprint in self._catalog.get_blueprints():
            group.add_command(self.build_command(blueprint))
        return group

    def _build_root(self) -> typer.Typer:
        settings = self._settings
        app = typer.Typer(
            name=settings.cli_name,
            help=settings.cli_description,
            invoke_without_command=True,
            add_completion=False,
            rich_markup_mode=None,
        )
        version_text = format_version(settings.cli_version)

        def _version_callback(value: bool) -> None:
            if value:
                typer.echo(version_text)
                raise typer.Exit(code=0)

        @app.callback()
        def root(
            ctx: typer.Context,
            list_blueprints: bool = typer.Option(False, "--list", help="List discovered blueprints and exit."),
            version: bool = typer.Option(
                False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
            ),
        ) -> None:
            del version
            if ctx.invoked_subcommand is not None:
                return
            if list_blueprints:
                self._print_list()
                return
            self._run(None, {})

        return app

    def build_command(self, blueprint: Blueprint) -> TyperCommand:
        label = blueprint_label(blueprint, self._catalog.get_blueprint_metadata(blueprint))

        params: list[TyperOption] = []
        option_names: dict[str, str] = {}
        for option in blueprint.options:
            param = build_option(option, self._registry.describe(option))
            assert param.name is not None
            option_names[param.name] = option.name
            params.append(param)

        def callback(**values: Any) -> None:
            options = {option_names[key]: value for key, value in values.items() if value is not None}
            self._run(blueprint.name, options)

        return TyperCommand(
            blueprint.name,
            callback=callback,
            params=params,
            help=label,
            short_help=label,
            rich_markup_mode=None,
        )

    def _run(self, blueprint_name: str | None, options: ParsedOptions) -> None:
        asyncio.run(self._dispatch(blueprint_name, options))

    def _print_list(self) -> None:
        entries = [(b, self._catalog.get_blueprint_metadata(b)) for b in self._catalog.get_blueprints()]
        self._console.print(build_blueprints_table(entries))


def build_option(option: BlueprintOption, descriptor: CliOptionDescriptor) -> TyperOption:
    flag = f"--{option.name}"
    common: dict[str, Any] = {
        "help": option.description or None,
        "required": option.enforced_at_parse,
        "callback": _validating_callback(descriptor),
    }
    if descriptor.needs_argument:
        # Absent values stay None and are dropped from the parsed mapping.
        return TyperOption(param_decls=[flag], metavar=f"<{option.name}>", default=None, **common)
    if option.required:
        # A required switch left off stays None: missing for the parser, or
        # for the executor's ask step when the option is askable.
        return TyperOption(param_decls=[flag], is_flag=True, flag_value=True, default=None, **common)
    return TyperOption(param_decls=[flag], is_flag=True, flag_value=True, default=False, **common)


def _validating_callback(descriptor: CliOptionDescriptor) -> Callable[[typer.Context, typer.CallbackParam, Any], Any]:
    def callback(ctx: typer.Context, param: typer.CallbackParam, value: Any) -> Any:
        if value is None:
            return None
        try:
            return descriptor.validator(value)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), ctx=ctx, param=param) from exc

    return callback
