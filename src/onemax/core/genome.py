"""
Genome and population representation for OneMax.

A genome is a 1-D ``int8`` tensor of 0/1 genes. A population is a 2-D tensor
of shape ``(population_size, genome_length)``, one genome per row. Fitness is
never stored; it is the row sum, recomputed whenever it is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from onemax.core.random_source import RandomSource

GENE_DTYPE = torch.int8


def random_population(
    population_size: int,
    genome_length: int,
    rng: RandomSource,
) -> Tensor:
    """Create a population of uniformly random bit strings."""
    return rng.bits((population_size, genome_length))


def fitness(genomes: Tensor) -> Tensor:
    """
    Count the 1s in each genome.

    Args:
        genomes: A single genome of shape (L,) or a population of shape (N, L)

    Returns:
        A 0-d tensor for a single genome, otherwise one int64 value per row
    """
    return genomes.sum(dim=-1, dtype=torch.int64)


def check_population(
    population: Tensor,
    population_size: int,
    genome_length: int,
) -> None:
    """
    Validate a population's shape and gene domain.

    Raises:
        ValueError: If the tensor is not (population_size, genome_length) or
            holds any value other than 0 and 1
    """
    expected = (population_size, genome_length)
    if population.dim() != 2 or tuple(population.shape) != expected:
        raise ValueError(
            f"Population must have shape {expected}, got {tuple(population.shape)}"
        )
    if not bool(((population == 0) | (population == 1)).all()):
        raise ValueError("Population genes must all be 0 or 1")


def as_population(genomes: Tensor | list[list[int]]) -> Tensor:
    """Convert nested lists (or any tensor) to a population tensor."""
    return torch.as_tensor(genomes).to(GENE_DTYPE)


def format_genome(genome: Tensor) -> str:
    """Render a genome as '0'/'1' characters with no separator."""
    return "".join("1" if gene else "0" for gene in genome.tolist())
