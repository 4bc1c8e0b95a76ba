"""Core module for the URL shortener application."""

from urlshortener.core.config import Settings, settings

__all__ = ["Settings", "settings"]
