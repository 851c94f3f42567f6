"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about typer, rich or the filesystem layout of
  blueprints: only blueprints, their options and their metadata.
"""
