"""URL shortening service for the URL shortener application.

This module contains the ShortenedURLService class, the facade the HTTP layer
talks to. It delegates to a code store and adds operation context to errors.
"""

import logging

from urlshortener.store.base import CodeStore
from urlshortener.store.exceptions import StoreError
from urlshortener.services.exceptions import wrap_store_error

logger = logging.getLogger(__name__)


class ShortenedURLService:
    """
    Service for URL shortening operations.

    Args:
        store: Code store holding the mappings
    """

    def __init__(self, store: CodeStore):
        self.store = store

    async def shorten_url(self, original_url: str) -> str:
        """
        Get the short code for a URL, creating one on first submission.

        Raises:
            ShortCodeGenerationError: If a unique short code cannot be generated
            URLStorageError: If the storage layer fails
        """
        try:
            return await self.store.shorten(original_url)
        except StoreError as e:
            logger.error(f"Failed to shorten URL: {e}")
            raise wrap_store_error(e, "shorten url") from e

    async def get_url(self, short_code: str) -> str:
        """
        Get the original URL for a short code.

        Raises:
            URLNotFoundError: If no URL with this code exists
            URLStorageError: If the storage layer fails
        """
        try:
            return await self.store.resolve(short_code)
        except StoreError as e:
            logger.debug(f"Failed to resolve '{short_code}': {e}")
            raise wrap_store_error(e, "get url") from e
