"""Random sources used to pick a fortune."""

from __future__ import annotations

import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Anything that can pick an index in ``range(count)``."""

    def choose_index(self, count: int) -> int:
        ...


class SeededRandomSource:
    """Reproducible source: the same seed always yields the same indices."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def choose_index(self, count: int) -> int:
        return self._rng.randrange(count)


class SystemRandomSource:
    """Source backed by operating system entropy."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def choose_index(self, count: int) -> int:
        return self._rng.randrange(count)


def source_for_seed(seed: Optional[int]) -> RandomSource:
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
