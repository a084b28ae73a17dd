"""Seeded, reproducible shuffling."""

import random
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")


class SeededShuffler:
    """Backward swap shuffle driven by a ``random.Random`` keyed on the seed.

    The same seed always yields the same permutation for the same input.
    String seeds are hashed by ``random`` itself, so the stream does not
    depend on ``PYTHONHASHSEED``.
    """

    def __init__(self, seed: Union[str, int, float]):
        self.seed = str(seed)
        self._rng = random.Random(self.seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of *items*; the input is left untouched."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self._rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled
