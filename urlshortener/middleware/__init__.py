"""HTTP middleware for the URL shortener application."""

from urlshortener.middleware.logging import RequestLoggingMiddleware, request_id_var

__all__ = ["RequestLoggingMiddleware", "request_id_var"]
