"""Blueprint discovery (data-driven).

Idea:
- Each blueprint lives in its own directory with a `blueprint.json`
  manifest; the CLI never needs a Python class per blueprint to build its
  command surface.
- Manifests are validated with pydantic. A broken manifest is skipped with
  a warning so one bad blueprint does not take the whole CLI down.

Layout:

    <blueprint_path>/
        api/
            blueprint.json
            api_blueprint.py
        legacy/
            blueprint.json
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, Field, ValidationError

from core.domain.models import Blueprint, BlueprintMetadata, BlueprintOption
from core.services.catalog import InMemoryCatalog

logger = logging.getLogger(__name__)

MANIFEST_NAME = "blueprint.json"


class BlueprintManifest(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(default="")
    tag: str | None = None
    active: bool = True
    reason: str | None = None
    entrypoint: str | None = None
    options: list[BlueprintOption] = Field(default_factory=list)

    def to_blueprint(self, source_dir: Path | None = None) -> Blueprint:
        return Blueprint(
            name=self.name,
            description=self.description,
            options=self.options,
            entrypoint=self.entrypoint,
            source_dir=source_dir,
        )

    def to_metadata(self) -> BlueprintMetadata:
        return BlueprintMetadata(tag=self.tag or None, is_active=self.active, reason=self.reason)


def load_manifest(path: Path) -> BlueprintManifest:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return BlueprintManifest.model_validate(data)


def iter_manifest_paths(paths: Sequence[Path]) -> list[Path]:
    """Manifests in configured directory order, then by subdirectory name."""

    found: list[Path] = []
    for base in paths:
        base = base.expanduser()
        if not base.is_dir():
            logger.debug("Blueprint path %s does not exist, skipping", base)
            continue
        for child in sorted(base.iterdir()):
            manifest = child / MANIFEST_NAME
            if child.is_dir() and manifest.is_file():
                found.append(manifest)
    return found


class BlueprintDiscovery:
    """Builds the blueprint catalog from manifest directories."""

    def __init__(self, paths: Sequence[Path]) -> None:
        self._paths = list(paths)

    async def discover(self) -> InMemoryCatalog:
        return await asyncio.to_thread(self.discover_sync)

    def discover_sync(self) -> InMemoryCatalog:
        catalog = InMemoryCatalog()
        for manifest_path in iter_manifest_paths(self._paths):
            try:
                manifest = load_manifest(manifest_path)
                blueprint = manifest.to_blueprint(source_dir=manifest_path.parent)
            except (OSError, json.JSONDecodeError, ValidationError) as exc:
                logger.warning("Skipping invalid blueprint manifest %s: %s", manifest_path, exc)
                continue

            if catalog.get_blueprint(blueprint.name, False) is not None:
                logger.warning(
                    "Skipping %s: blueprint %r already discovered", manifest_path, blueprint.name
                )
                continue

            catalog.add(blueprint, manifest.to_metadata())
            logger.debug("Discovered blueprint %r in %s", blueprint.name, manifest_path.parent)
        return catalog
