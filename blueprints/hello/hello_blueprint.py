from __future__ import annotations

from rich.console import Console

_console = Console()


def run(options: dict) -> None:
    greeting = f"Hello, {options['name']}!"
    if options.get("shout"):
        greeting = greeting.upper()
    for _ in range(options.get("times") or 1):
        _console.print(greeting, style="bold green")
