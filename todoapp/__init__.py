"""A todo service with a JSON API over SQLite, and client-side helpers."""

__version__ = "0.1.0"