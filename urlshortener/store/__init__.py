"""Code stores for the URL shortener application.

A code store maps original URLs to short codes and back. ``CodeStore`` is the
interface; ``SQLCodeStore`` persists through SQLAlchemy and
``InMemoryCodeStore`` keeps everything in process memory.
"""

from urlshortener.store.base import CodeStore, MappingConflict
from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.exceptions import (
    GenerationExhaustedError,
    NotFoundError,
    StorageFailureError,
    StoreError,
)
from urlshortener.store.memory import InMemoryCodeStore
from urlshortener.store.sql import SQLCodeStore

__all__ = [
    "CodeStore",
    "MappingConflict",
    "ShortCodeGenerator",
    "InMemoryCodeStore",
    "SQLCodeStore",
    "StoreError",
    "NotFoundError",
    "StorageFailureError",
    "GenerationExhaustedError",
]
