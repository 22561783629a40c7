"""
Random Source

Port for the randomness consumed by adjacency generation, plus the default
adapter backed by :class:`random.Random`.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional


class IRandomSource(ABC):
    """Provides uniformly distributed integers."""

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """
        Return an integer in ``[0, bound)``.

        Raises:
            ValueError: If ``bound`` is not positive.
        """
        pass


class SeededRandomSource(IRandomSource):
    """Random source over a private :class:`random.Random` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self.rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self.rng.randrange(bound)
