"""Option-type registry.

Each option type knows how to render a blueprint option as a flag and how
to coerce raw input. The registry is built once at startup
(`default_registry`) and passed explicitly to the surface builder and the
executor.

Validators raise `ValueError`; the command surface turns that into a
parse error, the executor into a re-prompt.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Protocol, runtime_checkable

from core.domain.models import BlueprintOption, CliOptionDescriptor
from core.errors import UnknownOptionTypeError

_TRUE = {"1", "true", "yes", "y", "on"}
_FALSE = {"0", "false", "no", "n", "off"}


@runtime_checkable
class ParameterType(Protocol):
    name: str

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        ...


class StringParameter:
    name = "string"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=True, validator=_to_string)


class BooleanParameter:
    name = "boolean"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=False, validator=_to_bool)


class NumberParameter:
    name = "number"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=True, validator=_to_float)


class IntegerParameter:
    name = "integer"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=True, validator=_to_int)


class PathParameter:
    name = "path"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=True, validator=_to_path)


class ListParameter:
    """Comma separated values; empty items are dropped."""

    name = "list"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        return CliOptionDescriptor(needs_argument=True, validator=_to_list)


class ChoiceParameter:
    name = "choice"

    def get_cli_config(self, option: BlueprintOption) -> CliOptionDescriptor:
        allowed = list(option.choices or [])

        def validate(raw: Any) -> str:
            value = _to_string(raw)
            if value not in allowed:
                raise ValueError(f"{value!r} is not one of: {', '.join(allowed)}")
            return value

        return CliOptionDescriptor(needs_argument=True, validator=validate)


def _to_string(raw: Any) -> str:
    if raw is None:
        raise ValueError("a value is required")
    return str(raw)


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{raw!r} is not a boolean")


def _to_float(raw: Any) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{raw!r} is not a number") from None


def _to_int(raw: Any) -> int:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    try:
        return int(str(raw).strip(), 10)
    except ValueError:
        raise ValueError(f"{raw!r} is not an integer") from None


def _to_path(raw: Any) -> Path:
    text = _to_string(raw).strip()
    if not text:
        raise ValueError("path cannot be empty")
    return Path(text).expanduser()


def _to_list(raw: Any) -> list[str]:
    if isinstance(raw, (list, tuple)):
        return [str(item) for item in raw]
    return [item.strip() for item in _to_string(raw).split(",") if item.strip()]


class ParameterRegistry:
    """Maps a declared option type to its `ParameterType`."""

    def __init__(self, params: Iterable[ParameterType] = ()) -> None:
        self._params: dict[str, ParameterType] = {}
        for param in params:
            self.register(param)

    def register(self, param: ParameterType) -> None:
        self._params[param.name] = param

    def get_param(self, type_name: str) -> ParameterType:
        try:
            return self._params[type_name]
        except KeyError:
            raise UnknownOptionTypeError(type_name, self.types()) from None

    def types(self) -> list[str]:
        return sorted(self._params)

    def describe(self, option: BlueprintOption) -> CliOptionDescriptor:
        return self.get_param(option.type).get_cli_config(option)


BUILTIN_PARAMETERS: tuple[ParameterType, ...] = (
    StringParameter(),
    BooleanParameter(),
    NumberParameter(),
    IntegerParameter(),
    PathParameter(),
    ListParameter(),
    ChoiceParameter(),
)


def default_registry() -> ParameterRegistry:
    return ParameterRegistry(BUILTIN_PARAMETERS)
