"""Blueprint executor.

Steps:
1. Ask for every required, askable option that was not given on the
   command line (the argument parser deliberately let it through).
2. Import the blueprint's entrypoint (`package.module:callable`), with the
   blueprint directory importable.
3. Call it with the resolved options and await the result when it is a
   coroutine.

Errors raised by the blueprint itself propagate untouched.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import sys
from typing import Any, Callable

import typer
from rich.console import Console
from rich.markup import escape

from core.domain.models import Blueprint, BlueprintOption, ParsedOptions
from core.errors import EntrypointError
from core.parameters import ParameterRegistry

logger = logging.getLogger(__name__)


class BlueprintExecutor:
    def __init__(
        self,
        blueprint: Blueprint,
        registry: ParameterRegistry,
        *,
        console: Console | None = None,
        prompt: Callable[..., Any] = typer.prompt,
        confirm: Callable[..., bool] = typer.confirm,
    ) -> None:
        self.blueprint = blueprint
        self._registry = registry
        self._console = console or Console(stderr=True)
        self._prompt = prompt
        self._confirm = confirm

    async def execute(self, options: ParsedOptions) -> None:
        resolved = self.ask_missing(options)
        target = self.load_entrypoint()

        result = target(resolved)
        if inspect.isawaitable(result):
            await result

    def ask_missing(self, options: ParsedOptions) -> ParsedOptions:
        resolved = dict(options)
        for option in self.blueprint.options:
            if option.name in resolved:
                continue
            if option.required and option.askable:
                resolved[option.name] = self._ask(option)
        return resolved

    def _ask(self, option: BlueprintOption) -> Any:
        descriptor = self._registry.describe(option)
        label = option.description or option.name

        if not descriptor.needs_argument:
            return descriptor.validator(self._confirm(label, default=False))

        if option.choices:
            label = f"{label} ({'/'.join(option.choices)})"
        while True:
            raw = self._prompt(label)
            try:
                return descriptor.validator(raw)
            except ValueError as exc:
                self._console.print(f"[yellow]Invalid value for --{option.name}:[/yellow] {escape(str(exc))}")

    def load_entrypoint(self) -> Callable[[ParsedOptions], Any]:
        entrypoint = self.blueprint.entrypoint
        if not entrypoint:
            raise EntrypointError(f"Blueprint {self.blueprint.name!r} declares no entrypoint")

        module_name, _, attr = entrypoint.partition(":")
        if not module_name or not attr:
            raise EntrypointError(
                f"Invalid entrypoint {entrypoint!r} for blueprint {self.blueprint.name!r} "
                "(expected 'package.module:callable')"
            )

        source_dir = self.blueprint.source_dir
        if source_dir is not None and str(source_dir) not in sys.path:
            sys.path.insert(0, str(source_dir))

        logger.debug("Loading entrypoint %s for blueprint %r", entrypoint, self.blueprint.name)
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise EntrypointError(f"Cannot import {module_name!r}: {exc}") from exc

        target: Any = module
        for part in attr.split("."):
            try:
                target = getattr(target, part)
            except AttributeError:
                raise EntrypointError(f"{module_name!r} has no attribute {attr!r}") from None

        if not callable(target):
            raise EntrypointError(f"Entrypoint {entrypoint!r} is not callable")
        return target
