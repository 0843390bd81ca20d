from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol


class RandomnessSource(Protocol):
    """Anything that can draw a uniform real in the closed interval [low, high].

    ``random.Random`` satisfies this protocol as-is.
    """

    def uniform(self, low: float, high: float) -> float:
        ...


@dataclass
class RNG:
    """
    Deterministic-friendly RNG wrapper around random.Random.

    Allows injecting a fixed seed for reproducible tests. Each instance owns its
    generator, so the global ``random`` state is never touched.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def uniform(self, low: float, high: float) -> float:
        """Return a random float N such that low <= N <= high."""
        return self._rng.uniform(low, high)


@dataclass
class FixedRandomness:
    """Randomness source pinned to a single value, for tests and previews.

    The value is returned regardless of the requested interval. ``calls`` counts
    the number of draws made.
    """

    value: float
    calls: int = field(default=0, init=False)

    def uniform(self, low: float, high: float) -> float:
        self.calls += 1
        return float(self.value)
