"""
Shuffle mutation.

Unlike the usual bit-flip operator, a mutated genome here is replaced by a
random permutation of its own genes. The number of 1s, and therefore the
fitness, never changes; only the positions of the genes do, which gives later
crossovers new material to combine.
"""

from __future__ import annotations

from typing import List

from torch import Tensor

from onemax.core.random_source import RandomSource
from onemax.evolution.operators import MutationStrategy


class ShuffleMutation(MutationStrategy):
    """Shuffles each genome independently with probability ``rate``."""

    def __init__(self, rate: float = 0.08):
        """
        Initialize shuffle mutation.

        Args:
            rate: Per-genome probability of being shuffled each generation
        """
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Mutation rate must be in [0, 1], got {rate}")
        self.rate = rate

    def mutate(self, population: Tensor, rng: RandomSource) -> List[int]:
        size, length = population.shape
        trials = rng.trials(size)
        mutated = (trials < self.rate).nonzero().flatten().tolist()

        for i in mutated:
            population[i] = population[i, rng.permutation(length)]

        return mutated
