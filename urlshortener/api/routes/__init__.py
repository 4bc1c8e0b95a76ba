"""Routes package initialization.

This module assembles the route collection for the application.
"""

from fastapi import APIRouter

from urlshortener.api.routes import shortener, redirect, health
from urlshortener.core.config import Settings


def build_api_router(app_settings: Settings) -> APIRouter:
    """Create the root router for the given settings."""
    api_router = APIRouter()

    # Shortening is served at the root, where the bundled front-end posts
    api_router.include_router(shortener.router)

    # Everything else lives under the API prefix, clear of the short code space
    api_router.include_router(shortener.api_router, prefix=app_settings.API_PREFIX)

    api_router.include_router(health.router, prefix=app_settings.API_PREFIX)

    # Include redirect routes last: /{short_code} matches any single segment
    api_router.include_router(redirect.router)

    return api_router


__all__ = ["build_api_router"]
