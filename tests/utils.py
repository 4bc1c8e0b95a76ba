"""Test utilities for URL shortener tests."""

import random
import string
from typing import Iterable, List

from urlshortener.store.base import CodeStore
from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.exceptions import StoreError


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8)}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


class ScriptedGenerator(ShortCodeGenerator):
    """Generator that hands out predetermined codes, then random ones."""

    def __init__(self, codes: Iterable[str], length: int = 6):
        super().__init__(length=length)
        self.codes: List[str] = list(codes)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        if self.codes:
            return self.codes.pop(0)
        return super().generate()


class FailingStore(CodeStore):
    """Store whose every operation raises the given store error."""

    def __init__(self, error: StoreError):
        super().__init__()
        self.error = error

    async def _find_or_insert(self, original: str, candidate: str) -> str:
        raise self.error

    async def resolve(self, code: str) -> str:
        raise self.error

    async def count(self) -> int:
        raise self.error

    async def ping(self) -> bool:
        return False
