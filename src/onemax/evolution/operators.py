"""
Base classes for the evolutionary operators.

This module defines the interfaces that the stages of the generational loop
implement:

- SelectionStrategy: Partitions the ranked population into mating pairs
- CrossoverStrategy: Recombines each pair into two offspring
- MutationStrategy: Perturbs individuals in place

The loop passes its ``RandomSource`` into every call that needs randomness,
so no operator holds or touches global RNG state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from torch import Tensor

from onemax.core.random_source import RandomSource


class SelectionStrategy(ABC):
    """
    Abstract base class for selection strategies.

    A selection strategy turns the population, already sorted by descending
    fitness, into pairs of parents for crossover. Every individual must end up
    in exactly one pair.
    """

    @abstractmethod
    def pair(self, population: Tensor) -> Tensor:
        """
        Partition the population into mating pairs.

        Args:
            population: Tensor of shape (N, L), sorted by descending fitness.
                Not modified.

        Returns:
            A new tensor of shape (N/2, 2, L) holding copies of the paired
            genomes.

        Raises:
            ValueError: If the population cannot be split into pairs (odd
                number of rows, or not a 2-D tensor)
        """
        pass


class CrossoverStrategy(ABC):
    """
    Abstract base class for crossover strategies.

    Crossover recombines the genes of each pair into two offspring that
    replace the parents. Offspring genes are copied from the parents, never
    invented, so the 0/1 domain is preserved.
    """

    @abstractmethod
    def crossover(self, pairs: Tensor, rng: RandomSource) -> Tensor:
        """
        Recombine every pair.

        Args:
            pairs: Tensor of shape (P, 2, L). Not modified.
            rng: Random source for crossover points

        Returns:
            Offspring tensor of the same shape; offspring of pair i are at
            index i.

        Example:
            >>> strategy = SinglePointCrossover()
            >>> offspring = strategy.crossover(pairs, RandomSource(seed=0))
            >>> offspring.shape == pairs.shape
            True
        """
        pass


class MutationStrategy(ABC):
    """
    Abstract base class for mutation strategies.

    Mutation introduces variation independently of pairing. It runs in place
    on the reassembled population.
    """

    @abstractmethod
    def mutate(self, population: Tensor, rng: RandomSource) -> List[int]:
        """
        Mutate the population in place.

        Args:
            population: Tensor of shape (N, L), modified in place
            rng: Random source for mutation trials and permutations

        Returns:
            Row indices of the individuals that were mutated, ascending
        """
        pass
