"""Core genome representation and random source."""

from onemax.core.random_source import RandomSource
from onemax.core.genome import (
    GENE_DTYPE,
    random_population,
    fitness,
    check_population,
    as_population,
    format_genome,
)

__all__ = [
    "RandomSource",
    "GENE_DTYPE",
    "random_population",
    "fitness",
    "check_population",
    "as_population",
    "format_genome",
]
