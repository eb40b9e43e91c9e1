"""Use cases, entities and errors for a public complaint and news service."""

__version__ = "0.1.0"