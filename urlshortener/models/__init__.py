"""
Data models for the URL shortener application.

This module imports and exports all SQLModel models used in the application.
"""

from urlshortener.models.url import URLMapping, URLMappingBase, URLMappingCreate

__all__ = [
    "URLMapping",
    "URLMappingBase",
    "URLMappingCreate",
]
