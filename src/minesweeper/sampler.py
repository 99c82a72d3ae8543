"""
Mine placement samplers.

A sampler picks which flat cell indices hold mines. The board takes
one as a dependency so tests can supply a fixed placement.
"""
from typing import Optional, Protocol, Sequence

import numpy as np


class MineSampler(Protocol):
    """Callable choosing ``mine_count`` distinct indices in ``range(cell_count)``."""

    def __call__(self, cell_count: int, mine_count: int) -> Sequence[int]:
        ...


class RandomSampler:
    """
    Uniform sampling without replacement backed by a numpy Generator.

    Args:
        seed: Seed for the generator, or None for fresh entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def reseed(self, seed: Optional[int]) -> None:
        """Replace the generator with one seeded from ``seed``."""
        self.rng = np.random.default_rng(seed)

    def __call__(self, cell_count: int, mine_count: int) -> Sequence[int]:
        chosen = self.rng.choice(cell_count, size=mine_count, replace=False)
        return [int(index) for index in chosen]


class FixedSampler:
    """Always returns the same placement. Indices are validated per call."""

    def __init__(self, indices: Sequence[int]) -> None:
        self.indices = list(indices)

    def __call__(self, cell_count: int, mine_count: int) -> Sequence[int]:
        if len(set(self.indices)) != mine_count:
            raise ValueError(
                f"Fixed placement has {len(set(self.indices))} mines, "
                f"board expects {mine_count}"
            )
        for index in self.indices:
            if not 0 <= index < cell_count:
                raise IndexError(f"Mine index {index} outside board")
        return list(self.indices)
