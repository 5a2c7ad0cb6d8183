"""Single-point crossover."""

from __future__ import annotations

from typing import Tuple

import torch
from torch import Tensor

from onemax.core.random_source import RandomSource
from onemax.evolution.operators import CrossoverStrategy


def single_point_crossover(
    parent_a: Tensor,
    parent_b: Tensor,
    point: int,
) -> Tuple[Tensor, Tensor]:
    """
    Swap the tails of two genomes at ``point``.

    child_a = parent_a[:point] + parent_b[point:]
    child_b = parent_b[:point] + parent_a[point:]

    A point of 0 swaps the genomes entirely; L - 1 swaps only the last gene.

    Raises:
        ValueError: If the parents differ in length or point is outside [0, L)
    """
    length = parent_a.shape[-1]
    if parent_b.shape[-1] != length:
        raise ValueError(
            f"Parents must have equal length, got {length} and {parent_b.shape[-1]}"
        )
    if not 0 <= point < length:
        raise ValueError(f"Crossover point must be in [0, {length}), got {point}")

    child_a = torch.cat([parent_a[:point], parent_b[point:]])
    child_b = torch.cat([parent_b[:point], parent_a[point:]])
    return child_a, child_b


class SinglePointCrossover(CrossoverStrategy):
    """
    Single-point crossover applied to every pair at once.

    Each pair gets its own point, drawn independently and uniformly from
    [0, L). Genes at or after the point are exchanged between the two parents.
    """

    def crossover(self, pairs: Tensor, rng: RandomSource) -> Tensor:
        n_pairs, _, length = pairs.shape
        points = rng.crossover_points(n_pairs, length)
        if bool(((points < 0) | (points >= length)).any()):
            raise ValueError(
                f"Crossover points must be in [0, {length}), got {points.tolist()}"
            )

        # True from each pair's point to the end of the genome
        tail = torch.arange(length) >= points.unsqueeze(1)

        first, second = pairs[:, 0], pairs[:, 1]
        offspring = torch.empty_like(pairs)
        offspring[:, 0] = torch.where(tail, second, first)
        offspring[:, 1] = torch.where(tail, first, second)
        return offspring
