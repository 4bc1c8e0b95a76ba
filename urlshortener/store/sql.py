"""SQL-backed code store."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from urlshortener.db.base import Database
from urlshortener.models.url import URLMappingCreate
from urlshortener.repositories.url_repository import (
    DuplicateEntityError,
    RepositoryError,
    URLRepository,
)
from urlshortener.store.base import CodeStore, DEFAULT_MAX_ATTEMPTS, MappingConflict
from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.exceptions import NotFoundError, StorageFailureError

logger = logging.getLogger(__name__)


class SQLCodeStore(CodeStore):
    """
    Code store persisting mappings through SQLAlchemy.

    Every call round-trips to the database. Each shorten attempt runs in its
    own transaction; the UNIQUE constraints on ``urls.original`` and
    ``urls.short`` decide races between concurrent callers, in this process
    or any other sharing the database.

    The store takes ownership of ``database`` and disposes it in ``close``.
    """

    def __init__(
        self,
        database: Database,
        generator: Optional[ShortCodeGenerator] = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        repository: Optional[URLRepository] = None,
    ):
        super().__init__(generator=generator, max_attempts=max_attempts)
        self.database = database
        self.repository = repository or URLRepository()

    async def _find_or_insert(self, original: str, candidate: str) -> str:
        try:
            async with self.database.transaction() as db:
                existing = await self.repository.get_by_original(db, original)
                if existing is not None:
                    return existing.short

                mapping = await self.repository.create_mapping(
                    db, URLMappingCreate(original=original, short=candidate)
                )
                logger.info(f"Stored new mapping with short code '{mapping.short}'")
                return mapping.short
        except DuplicateEntityError as e:
            raise MappingConflict(candidate) from e
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Storage failure while shortening URL: {e}")
            raise StorageFailureError(f"failed to store mapping: {e}") from e

    async def resolve(self, code: str) -> str:
        try:
            async with self.database.session() as db:
                mapping = await self.repository.get_by_short_code(db, code)
        except (RepositoryError, SQLAlchemyError) as e:
            logger.error(f"Storage failure while resolving '{code}': {e}")
            raise StorageFailureError(f"failed to look up short code: {e}") from e

        if mapping is None:
            raise NotFoundError(code)
        return mapping.original

    async def count(self) -> int:
        try:
            async with self.database.session() as db:
                return await self.repository.count(db)
        except (RepositoryError, SQLAlchemyError) as e:
            raise StorageFailureError(f"failed to count mappings: {e}") from e

    async def ping(self) -> bool:
        result = await self.database.check_connection()
        return result["status"] == "healthy"

    async def close(self) -> None:
        await self.database.dispose()
