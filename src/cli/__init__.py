"""CLI layer (typer + rich).

Builds the command surface from the discovered catalog and hosts the
interactive selector.
"""
