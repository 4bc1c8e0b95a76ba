"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access the store, the service and application settings. Everything is
read from ``app.state``, where the application lifespan puts it.
"""

from fastapi import Depends, Request

from urlshortener.core.config import Settings
from urlshortener.services.shortener import ShortenedURLService
from urlshortener.store.base import CodeStore


def get_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


def get_code_store(request: Request) -> CodeStore:
    """Get the code store owned by the application."""
    return request.app.state.store


async def get_shortener_service(
    store: CodeStore = Depends(get_code_store),
) -> ShortenedURLService:
    """Get an instance of the URL shortening service."""
    return ShortenedURLService(store=store)


def get_base_url(request: Request, app_settings: Settings = Depends(get_settings)) -> str:
    """Get the base URL for shortened links."""
    if app_settings.BASE_URL:
        return app_settings.BASE_URL
    return str(request.base_url).rstrip("/")
