"""Service layer for the URL shortener application.

This package contains the service facade the HTTP layer uses.
"""

from urlshortener.services.shortener import ShortenedURLService

__all__ = ["ShortenedURLService"]
