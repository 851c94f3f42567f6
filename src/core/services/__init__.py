"""Core services: the in-memory catalog and the dispatcher."""
