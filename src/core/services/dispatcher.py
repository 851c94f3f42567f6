"""Dispatch of a blueprint name to its execution.

Flow:
1. No name given: ask the selector.
2. Resolve the name in the catalog (missing name is a catalog
   inconsistency and propagates).
3. An explicitly named but inactive blueprint is never executed: its
   options are dropped and the user is asked to pick another one.
4. Active: build an execution bound to the blueprint and await it.

The re-selection happens at most once, because the selector only returns
active blueprints; an inactive name coming back from it is an error.
"""

from __future__ import annotations

import logging

from core.domain.models import Blueprint, ParsedOptions
from core.errors import BlueprintInactiveError
from core.interfaces.catalog import BlueprintCatalog
from core.interfaces.execution import BlueprintSelector, ExecutionFactory

logger = logging.getLogger(__name__)


class Dispatcher:
    def __init__(
        self,
        catalog: BlueprintCatalog,
        selector: BlueprintSelector,
        execution_factory: ExecutionFactory,
    ) -> None:
        self._catalog = catalog
        self._selector = selector
        self._execution_factory = execution_factory

    async def dispatch(self, blueprint_name: str | None, options: ParsedOptions) -> None:
        blueprint = await self.resolve(blueprint_name)
        if blueprint_name is not None and blueprint.name != blueprint_name:
            # Command-line options belonged to the inactive blueprint.
            options = {}

        execution = self._execution_factory(blueprint)
        logger.debug("Executing blueprint %r with options %s", blueprint.name, sorted(options))
        await execution.execute(options)

    async def resolve(self, blueprint_name: str | None) -> Blueprint:
        """Return the active blueprint to run, prompting when needed."""

        name = blueprint_name
        selected = False
        while True:
            if name is None:
                name = await self._selector.select()
                selected = True

            blueprint = self._catalog.get_blueprint(name, True)
            assert blueprint is not None

            if self._catalog.get_blueprint_metadata(blueprint).is_active:
                return blueprint
            if selected:
                raise BlueprintInactiveError(name)

            logger.info("Blueprint %r is inactive, asking for another one", name)
            name = None
