"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Blueprint manifests arrive as untyped JSON; validating at the edge keeps
  the dispatch pipeline free of defensive checks.
- Frozen models make the catalog read-only once discovery finishes.

Note:
- These models describe *what* a blueprint declares, not *how* it runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

# Option name -> resolved value. Options absent from the command line are
# absent from the mapping.
ParsedOptions = dict[str, Any]


class BlueprintOption(BaseModel):
    """A parameter declared by a blueprint.

    `required` options that are also `askable` are not enforced by the
    argument parser: the executor asks for them interactively instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9][A-Za-z0-9_-]*$",
        description="Flag token, rendered as `--<name>`.",
    )
    description: str = Field(
        default="",
        description="Help text shown next to the flag.",
    )
    type: str = Field(
        default="string",
        min_length=1,
        description="Key into the option-type registry.",
    )
    required: bool = Field(
        default=False,
        alias="require",
        description="The blueprint cannot run without a value.",
    )
    askable: bool = Field(
        default=False,
        alias="ask",
        description="A missing value may be asked for interactively.",
    )
    choices: list[str] | None = Field(
        default=None,
        description="Allowed values for the `choice` type.",
    )

    @property
    def enforced_at_parse(self) -> bool:
        return self.required and not self.askable

    @property
    def param_name(self) -> str:
        """Identifier the argument parser derives from `--<name>`."""

        return self.name.replace("-", "_").lower()


class Blueprint(BaseModel):
    """A named, describable unit of work exposed as a subcommand."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=64,
        pattern=r"^[A-Za-z0-9][A-Za-z0-9_.-]*$",
        description="Globally unique; used as the subcommand token.",
    )
    description: str = Field(default="")
    options: list[BlueprintOption] = Field(
        default_factory=list,
        description="Declared options, in flag order.",
    )
    entrypoint: str | None = Field(
        default=None,
        description="`package.module:callable` run by the executor.",
    )
    source_dir: Path | None = Field(
        default=None,
        description="Directory the blueprint was discovered in.",
    )

    @model_validator(mode="after")
    def _unique_option_names(self) -> "Blueprint":
        # `--dry-run`, `--dry_run` and `--Dry-Run` share one parser parameter name.
        seen: dict[str, str] = {}
        for option in self.options:
            key = option.param_name
            if key in seen:
                raise ValueError(
                    f"option {option.name!r} clashes with {seen[key]!r} in blueprint {self.name!r}"
                )
            seen[key] = option.name
        return self

    def get_option(self, name: str) -> BlueprintOption | None:
        for option in self.options:
            if option.name == name:
                return option
        return None


class BlueprintMetadata(BaseModel):
    """Side-channel descriptor looked up per blueprint; never mutated."""

    model_config = ConfigDict(frozen=True)

    tag: str | None = Field(
        default=None,
        description="Short label shown before the description (e.g. 'beta').",
    )
    is_active: bool = Field(
        default=True,
        description="Inactive blueprints are listed but never executed.",
    )
    reason: str | None = Field(
        default=None,
        description="Why the blueprint is inactive, shown in the selection list.",
    )


@dataclass(frozen=True)
class CliOptionDescriptor:
    """How an option renders on the command line.

    `validator` receives the raw value and returns the coerced one, raising
    `ValueError` when the input is not acceptable.
    """

    needs_argument: bool
    validator: Callable[[Any], Any]
