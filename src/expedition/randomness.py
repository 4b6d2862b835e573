"""Shared randomness source for an expedition day.

Every stochastic decision in a run draws from one ``RandomSource`` instance,
so a fixed seed reproduces the whole day, log lines included.
"""

from __future__ import annotations

import random
import uuid
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Seedable pseudo-random generator shared by reference across a run.

    Attributes:
        seed: Seed the source was created with (None for OS entropy)
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_float(self) -> float:
        """Uniform float in [0, 1)."""
        return self._random.random()

    def next_int(self, low: int, high_exclusive: int) -> int:
        """Uniform integer in [low, high_exclusive).

        Raises:
            ValueError: If the range is empty
        """
        if high_exclusive <= low:
            raise ValueError(f"Empty range [{low}, {high_exclusive})")
        return self._random.randrange(low, high_exclusive)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.next_int(0, len(items))]

    def shuffled(self, items: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates shuffled copy of ``items``."""
        result = list(items)
        for k in range(len(result) - 1, 0, -1):
            j = self.next_int(0, k + 1)
            result[k], result[j] = result[j], result[k]
        return result

    def next_uuid(self) -> uuid.UUID:
        """Version-4 UUID built from this source's bits."""
        return uuid.UUID(int=self._random.getrandbits(128), version=4)
