"""Core errors.

Why a dedicated module:
- The CLI boundary (`cli.main.run`) catches `BlueprintCliError` as a single
  family and renders it; anything else (blueprint execution failures) keeps
  its own type and traceback.
- Lookup failures also subclass `LookupError` so callers that only care
  about "not found" semantics can catch the builtin.
"""

from __future__ import annotations


class BlueprintCliError(Exception):
    """Base class for every error raised by the dispatch pipeline."""


class BlueprintNotFoundError(BlueprintCliError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Blueprint not found: {name!r}")
        self.name = name


class UnknownOptionTypeError(BlueprintCliError, LookupError):
    def __init__(self, type_name: str, known: list[str] | None = None) -> None:
        message = f"Unknown option type: {type_name!r}"
        if known:
            message += f" (known types: {', '.join(known)})"
        super().__init__(message)
        self.type_name = type_name


class DuplicateBlueprintError(BlueprintCliError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Blueprint name registered twice: {name!r}")
        self.name = name


class BlueprintInactiveError(BlueprintCliError):
    """An inactive blueprint came back from interactive selection."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Blueprint {name!r} is not active and cannot be executed")
        self.name = name


class NoActiveBlueprintError(BlueprintCliError):
    def __init__(self) -> None:
        super().__init__("No selectable blueprint: every discovered blueprint is inactive")


class EntrypointError(BlueprintCliError):
    """The blueprint's entrypoint is missing or cannot be imported."""
