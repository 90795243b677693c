"""Randomness sources for resource decay.

The simulation service draws every decay amount through a ``DecaySource`` so
that tests can swap true randomness for a seeded generator or a fixed
sequence of draws.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import cycle
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class DecaySource(Protocol):
    """Anything that can draw an integer from an inclusive range."""

    def draw(self, low: int, high: int) -> int: ...


class RandomDecaySource:
    """Uniform draws backed by a NumPy random generator.

    Attributes:
        seed: Seed passed to ``numpy.random.default_rng``; None for fresh entropy.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def draw(self, low: int, high: int) -> int:
        """Draw uniformly from ``low..high`` inclusive."""
        return int(self._rng.integers(low, high, endpoint=True))

    def __repr__(self) -> str:
        return f"RandomDecaySource(seed={self.seed})"


class FixedDecaySource:
    """Replays a fixed sequence of draws, starting over when exhausted.

    Each value is clamped into the requested range, so a source built with
    ``[0, 99]`` yields the range bounds.
    """

    def __init__(self, values: Iterable[int]):
        """Initialize with the draws to replay.

        Args:
            values: Non-empty sequence of integers.

        Raises:
            ValueError: If ``values`` is empty.
        """
        self.values = [int(v) for v in values]
        if not self.values:
            msg = "FixedDecaySource needs at least one value"
            raise ValueError(msg)
        self._values = cycle(self.values)

    def draw(self, low: int, high: int) -> int:
        return min(max(next(self._values), low), high)

    def __repr__(self) -> str:
        return f"FixedDecaySource({self.values})"
