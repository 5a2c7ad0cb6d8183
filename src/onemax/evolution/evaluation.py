"""Fitness evaluation and population statistics."""

from __future__ import annotations

import torch
from torch import Tensor

from onemax.core.genome import fitness


class FitnessEvaluator:
    """
    Ranks a population by descending fitness, in place.

    Fitness is computed once per row into a parallel tensor and the rows are
    then reordered by a stable sort over that tensor, so ties keep their
    current relative order. After ``evaluate`` returns, ``population[0]`` is
    the best individual.
    """

    def evaluate(self, population: Tensor) -> Tensor:
        """
        Sort the population by descending fitness.

        Args:
            population: Tensor of shape (N, L), reordered in place

        Returns:
            Fitness of each row after sorting, non-increasing
        """
        scores = fitness(population)
        order = torch.argsort(scores, descending=True, stable=True)
        population.copy_(population[order])
        return scores[order]


def population_diversity(population: Tensor) -> float:
    """
    Compute the diversity of a population.

    This is the mean pairwise Hamming distance between individuals divided by
    the genome length. At a locus where a fraction p of the N individuals
    carry a 1, the share of differing pairs is 2·p·(1−p)·N/(N−1).

    Returns:
        Float between 0 (all identical) and 1 (maximally diverse)
    """
    n = population.shape[0]
    if n < 2:
        return 0.0

    p = population.to(torch.float64).mean(dim=0)
    per_locus = 2 * p * (1 - p) * n / (n - 1)
    return float(per_locus.mean())
