"""
Random Sources
===============

Injected sampling capability for the generators. A random source offers
two operations:

- ``uniform_int(low, high)``: a uniform integer in the half-open range
  ``[low, high)``.
- ``weighted_index(weights)``: an index into *weights*, chosen with
  probability proportional to its integer weight.

Two backends are provided. :class:`SeededRandomSource` wraps numpy's
PCG64 generator and is fully reproducible for a given seed.
:class:`SystemRandomSource` draws from the operating system's entropy
pool and is not reproducible.

Neither backend is safe to share between threads without external
locking; each sampling call advances internal state.

References:
    - O'Neill, M. E. (2014). PCG: A Family of Simple Fast Space-Efficient
      Statistically Good Algorithms for Random Number Generation.
    - NumPy Random Generator. https://numpy.org/doc/stable/reference/random/generator.html
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from keysmith.core.errors import InvalidConfigurationError

MAX_SEED = 2**64 - 1


@runtime_checkable
class RandomSource(Protocol):
    """Sampling capability consumed by the generators."""

    def uniform_int(self, low: int, high: int) -> int: ...

    def weighted_index(self, weights: Sequence[int]) -> int: ...


class BaseRandomSource(ABC):
    """Implements weighted selection on top of :meth:`uniform_int`.

    A single draw in ``[0, total)`` is located by a cumulative scan over
    *weights*; the first index whose cumulative weight exceeds the draw
    wins, so the result is deterministic for a deterministic draw.
    """

    @abstractmethod
    def uniform_int(self, low: int, high: int) -> int:
        """Return a uniform integer in ``[low, high)``."""

    def weighted_index(self, weights: Sequence[int]) -> int:
        if not weights:
            raise InvalidConfigurationError("weights must not be empty")
        if any(w < 0 for w in weights):
            raise InvalidConfigurationError(f"negative weight in {list(weights)}")
        total = sum(weights)
        if total <= 0:
            raise InvalidConfigurationError("total weight must be positive")

        draw = self.uniform_int(0, total)
        cumulative = 0
        for index, weight in enumerate(weights):
            cumulative += weight
            if draw < cumulative:
                return index
        # Unreachable: draw < total == final cumulative weight
        raise InvalidConfigurationError("weighted selection out of range")

    @staticmethod
    def _check_range(low: int, high: int) -> None:
        if high <= low:
            raise InvalidConfigurationError(f"empty range [{low}, {high})")


class SeededRandomSource(BaseRandomSource):
    """Deterministic source backed by ``numpy.random.default_rng(seed)``."""

    def __init__(self, seed: int) -> None:
        if not 0 <= seed <= MAX_SEED:
            raise InvalidConfigurationError(
                f"seed must be between 0 and {MAX_SEED}, got {seed}"
            )
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def uniform_int(self, low: int, high: int) -> int:
        self._check_range(low, high)
        return int(self._rng.integers(low, high))


class SystemRandomSource(BaseRandomSource):
    """Non-reproducible source backed by :class:`random.SystemRandom`."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def uniform_int(self, low: int, high: int) -> int:
        self._check_range(low, high)
        return self._rng.randrange(low, high)


def create_random_source(seed: Optional[int] = None) -> BaseRandomSource:
    """Return a seeded source when *seed* is given, else a system source."""
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
