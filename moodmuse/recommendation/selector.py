"""
Random selection for MoodMuse recommendations.
"""
from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSelector:
    """Picks a uniformly shuffled subset of candidates.

    Wraps a numpy Generator so tests and reproducible runs can pass a seed.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def select(self, candidates: Sequence[T], count: int) -> List[T]:
        """Shuffle candidates and keep the first ``count``.

        Args:
            candidates: Songs (or anything) to choose from
            count: Maximum number of items to return

        Returns:
            Up to ``min(count, len(candidates))`` items in random order
        """
        if count <= 0 or not candidates:
            return []
        order = self.rng.permutation(len(candidates))
        limit = min(count, len(candidates))
        return [candidates[int(i)] for i in order[:limit]]

    def choice(self, options: Sequence[T]) -> T:
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return options[int(self.rng.integers(len(options)))]
