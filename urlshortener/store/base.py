"""Abstract code store.

A code store owns the mapping between original URLs and short codes. This
module holds the interface and the generate-or-reuse policy shared by every
implementation; subclasses supply the storage primitives.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.exceptions import GenerationExhaustedError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class MappingConflict(Exception):
    """
    A candidate insert lost a uniqueness check.

    Either the candidate short code is taken, or another caller stored the
    same original URL between the lookup and the insert. Both are resolved by
    running another attempt.
    """

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"insert of candidate '{candidate}' conflicted")


class CodeStore(ABC):
    """
    Durable, uniqueness-preserving mapping between original URLs and short codes.

    Args:
        generator: Source of candidate short codes
        max_attempts: How many candidates ``shorten`` tries before giving up
    """

    def __init__(self, generator: Optional[ShortCodeGenerator] = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.generator = generator or ShortCodeGenerator()
        self.max_attempts = max_attempts

    async def shorten(self, original: str) -> str:
        """
        Return the short code for ``original``, creating a mapping if needed.

        Re-submitting an original returns its existing code. A new mapping
        gets a freshly generated code; uniqueness conflicts are retried with
        a new candidate up to ``max_attempts`` times.

        Raises:
            GenerationExhaustedError: If every attempt conflicted
            StorageFailureError: If the storage layer fails
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.generator.generate()
            try:
                return await self._find_or_insert(original, candidate)
            except MappingConflict:
                logger.warning(
                    f"Short code conflict on attempt {attempt}/{self.max_attempts} "
                    f"(candidate '{candidate}')"
                )

        logger.error(f"Gave up generating a short code after {self.max_attempts} attempts")
        raise GenerationExhaustedError(self.max_attempts)

    @abstractmethod
    async def resolve(self, code: str) -> str:
        """
        Return the original URL stored for ``code``.

        Raises:
            NotFoundError: If no mapping has this code
            StorageFailureError: If the storage layer fails
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored mappings."""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True if the storage is reachable."""

    async def close(self) -> None:
        """Release resources owned by the store."""

    @abstractmethod
    async def _find_or_insert(self, original: str, candidate: str) -> str:
        """
        Return the existing code for ``original`` or store ``candidate`` for it.

        The lookup and insert must be arbitrated by the storage layer, so that
        neither column ever holds a duplicate.

        Raises:
            MappingConflict: If the insert violated a uniqueness constraint
            StorageFailureError: If the storage layer fails
        """
