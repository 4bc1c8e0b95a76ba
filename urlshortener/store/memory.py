"""In-memory code store."""

import asyncio
import logging
from typing import Dict, Optional

from urlshortener.store.base import CodeStore, DEFAULT_MAX_ATTEMPTS, MappingConflict
from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class InMemoryCodeStore(CodeStore):
    """
    Code store keeping mappings in two dictionaries.

    A lock serializes check-then-insert, which plays the role of the unique
    constraints of the SQL store. Contents live as long as the process and
    are not shared between processes.
    """

    def __init__(self, generator: Optional[ShortCodeGenerator] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        super().__init__(generator=generator, max_attempts=max_attempts)
        self._by_original: Dict[str, str] = {}
        self._by_short: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def _find_or_insert(self, original: str, candidate: str) -> str:
        async with self._lock:
            existing = self._by_original.get(original)
            if existing is not None:
                return existing
            if candidate in self._by_short:
                raise MappingConflict(candidate)

            self._by_original[original] = candidate
            self._by_short[candidate] = original
            logger.info(f"Stored new mapping with short code '{candidate}'")
            return candidate

    async def resolve(self, code: str) -> str:
        try:
            return self._by_short[code]
        except KeyError:
            raise NotFoundError(code) from None

    async def count(self) -> int:
        return len(self._by_short)

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._by_short)
