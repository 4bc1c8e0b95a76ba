"""Exceptions raised by code stores.

Callers tell the kinds apart to choose a response: a missing code is the
client's problem, everything else is ours.
"""


class StoreError(Exception):
    """Base exception for all code store errors."""
    pass


class NotFoundError(StoreError):
    """No mapping exists for the requested short code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"short code '{code}' not found")


class StorageFailureError(StoreError):
    """The underlying storage is unreachable or failed."""
    pass


class GenerationExhaustedError(StoreError):
    """Every candidate short code in the retry budget hit a uniqueness conflict."""

    def __init__(self, attempts: int):
        self.attempts = attempts
        super().__init__(f"no unique short code after {attempts} attempts")
