"""Short code generation."""

import random
from typing import Optional

from urlshortener.core.config import DEFAULT_CODE_ALPHABET

DEFAULT_CODE_LENGTH = 6


class ShortCodeGenerator:
    """
    Draws fixed-length codes uniformly from an alphabet.

    Each position is chosen independently. The default random source is a
    single ``random.SystemRandom``, which reads the OS CSPRNG and can be
    shared by concurrent callers. Tests may inject a seeded ``random.Random``.
    """

    def __init__(
        self,
        length: int = DEFAULT_CODE_LENGTH,
        alphabet: str = DEFAULT_CODE_ALPHABET,
        rng: Optional[random.Random] = None,
    ):
        if length < 1:
            raise ValueError(f"code length must be at least 1, got {length}")
        if len(alphabet) < 2:
            raise ValueError("alphabet needs at least two symbols")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet contains duplicate symbols")

        self.length = length
        self.alphabet = alphabet
        self._symbols = frozenset(alphabet)
        self._rng = rng or random.SystemRandom()

    @property
    def space_size(self) -> int:
        """Number of distinct codes this generator can produce."""
        return len(self.alphabet) ** self.length

    def generate(self) -> str:
        return "".join(self._rng.choice(self.alphabet) for _ in range(self.length))

    def is_valid(self, code: str) -> bool:
        """Check that ``code`` has this generator's length and alphabet."""
        return len(code) == self.length and all(c in self._symbols for c in code)
