"""Core interfaces and abstractions.

Why:
- Defines the contracts (Protocol) that the catalog, the selector and the
  executor implement.
- Lets the dispatcher depend on abstractions, so tests swap in fakes.
"""
