"""URL Repository for the URL shortener application.

This module provides the URLRepository class for database operations related to URLMapping models.
Following the Repository pattern, it abstracts database interactions for URL shortening operations.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from urlshortener.models.url import URLMapping, URLMappingCreate
from urlshortener.repositories.base import BaseRepository, RepositoryError, DuplicateEntityError

UNIQUE_FIELDS = ("original", "short")


class URLRepository(BaseRepository[URLMapping, URLMappingCreate]):
    """
    Repository for URLMapping model database operations.

    Lookups go by either unique column. Inserts rely on the table's UNIQUE
    constraints and report violations as DuplicateEntityError.
    """

    def __init__(self):
        """Initialize the repository with the URLMapping model type."""
        super().__init__(URLMapping)

    async def create_mapping(
        self,
        db: AsyncSession,
        data: Union[URLMappingCreate, Dict[str, Any]]
    ) -> URLMapping:
        """
        Insert a new mapping.

        Args:
            db: Database session
            data: Mapping data (either as a URLMappingCreate model or dictionary)

        Returns:
            The created URLMapping entity

        Raises:
            DuplicateEntityError: If the original URL or the short code already exists
            RepositoryError: On other database errors
        """
        return await self.create(db, data, unique_fields=UNIQUE_FIELDS)

    async def get_by_original(self, db: AsyncSession, original: str) -> Optional[URLMapping]:
        """
        Find the mapping for an original URL.

        Returns:
            The URLMapping if found, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        return await self.get_one_by(db, "original", original)

    async def get_by_short_code(self, db: AsyncSession, short_code: str) -> Optional[URLMapping]:
        """
        Find a mapping by its short code.

        Args:
            db: Database session
            short_code: The unique short code to look up

        Returns:
            The URLMapping if found, None otherwise

        Raises:
            RepositoryError: On database errors
        """
        return await self.get_one_by(db, "short", short_code)


__all__ = ["URLRepository", "RepositoryError", "DuplicateEntityError"]
