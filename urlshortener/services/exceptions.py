"""Exceptions for the URL shortener service layer.

Each service exception mirrors one code store error kind and adds the name
of the operation that failed. The store error stays reachable through
``__cause__``.
"""

from typing import Dict, Optional, Type

from urlshortener.store.exceptions import (
    GenerationExhaustedError,
    NotFoundError,
    StorageFailureError,
    StoreError,
)


class ServiceError(Exception):
    """Base exception for all service-level errors."""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.operation = operation
        if operation:
            message = f"{operation}: {message}"
        super().__init__(message)


class URLNotFoundError(ServiceError):
    """URL with the specified short code was not found."""
    pass


class URLStorageError(ServiceError):
    """The storage layer failed."""
    pass


class ShortCodeGenerationError(ServiceError):
    """Failed to generate a unique short code."""
    pass


STORE_ERROR_KINDS: Dict[Type[StoreError], Type[ServiceError]] = {
    NotFoundError: URLNotFoundError,
    StorageFailureError: URLStorageError,
    GenerationExhaustedError: ShortCodeGenerationError,
}


def wrap_store_error(error: StoreError, operation: str) -> ServiceError:
    """Build the service exception of the same kind as ``error``."""
    for store_kind, service_kind in STORE_ERROR_KINDS.items():
        if isinstance(error, store_kind):
            return service_kind(str(error), operation=operation)
    return URLStorageError(str(error), operation=operation)
