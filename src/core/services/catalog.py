"""In-memory blueprint catalog.

Discovery fills the catalog once at startup; afterwards it is only read.
Blueprint names must be unique, since they become subcommand tokens.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Blueprint, BlueprintMetadata
from core.errors import BlueprintNotFoundError, DuplicateBlueprintError


class InMemoryCatalog:
    def __init__(self, entries: Iterable[tuple[Blueprint, BlueprintMetadata]] = ()) -> None:
        self._blueprints: dict[str, Blueprint] = {}
        self._metadata: dict[str, BlueprintMetadata] = {}
        for blueprint, metadata in entries:
            self.add(blueprint, metadata)

    def add(self, blueprint: Blueprint, metadata: BlueprintMetadata | None = None) -> None:
        if blueprint.name in self._blueprints:
            raise DuplicateBlueprintError(blueprint.name)
        self._blueprints[blueprint.name] = blueprint
        self._metadata[blueprint.name] = metadata or BlueprintMetadata()

    def get_blueprints(self) -> list[Blueprint]:
        return list(self._blueprints.values())

    def get_blueprint(self, name: str, throw_if_missing: bool = True) -> Blueprint | None:
        blueprint = self._blueprints.get(name)
        if blueprint is None and throw_if_missing:
            raise BlueprintNotFoundError(name)
        return blueprint

    def get_blueprint_metadata(self, blueprint: Blueprint) -> BlueprintMetadata:
        try:
            return self._metadata[blueprint.name]
        except KeyError:
            raise BlueprintNotFoundError(blueprint.name) from None

    def active_blueprints(self) -> list[Blueprint]:
        return [b for b in self._blueprints.values() if self._metadata[b.name].is_active]

    def __len__(self) -> int:
        return len(self._blueprints)
