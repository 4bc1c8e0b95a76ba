"""Database module for the URL shortener application."""
from urlshortener.db.base import Database, get_engine_config, is_memory_sqlite

__all__ = [
    "Database",
    "get_engine_config",
    "is_memory_sqlite",
]
