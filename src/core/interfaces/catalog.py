"""Blueprint catalog contract.

Why Protocol:
- Discovery strategies (manifest directories today, something else later)
  stay interchangeable as long as they hand over a finished catalog.
- The surface builder and the dispatcher only read from it.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Blueprint, BlueprintMetadata


@runtime_checkable
class BlueprintCatalog(Protocol):
    """Read-only view over the discovered blueprints."""

    def get_blueprints(self) -> Sequence[Blueprint]:
        """All blueprints, in discovery order."""

        ...

    def get_blueprint(self, name: str, throw_if_missing: bool = True) -> Blueprint | None:
        """Look a blueprint up by name.

        Raises `BlueprintNotFoundError` when missing and `throw_if_missing`.
        """

        ...

    def get_blueprint_metadata(self, blueprint: Blueprint) -> BlueprintMetadata:
        ...
