"""Concrete collaborators: manifest discovery and blueprint execution."""
