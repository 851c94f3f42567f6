"""Core: blueprint domain, option types, catalog and dispatch.

Knows nothing about typer or rich; the CLI layer drives it.
"""
