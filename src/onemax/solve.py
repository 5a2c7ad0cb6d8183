"""
Simple interface for running OneMax.

``solve()`` is the one-call way to run the genetic algorithm: it applies the
configured verbosity, sets up the random source and runs the loop to
completion.
"""

from __future__ import annotations

from typing import Callable, Optional

from onemax.config import Config, get_default_config
from onemax.core.random_source import RandomSource
from onemax.evolution.loop import EvolutionLoop, EvolutionResult, GenerationSnapshot
from onemax.utils.logging import set_verbosity


def solve(
    config: Config | None = None,
    on_generation: Optional[Callable[[GenerationSnapshot], None]] = None,
    rng: RandomSource | None = None,
) -> EvolutionResult:
    """
    Evolve a random population until one genome is all 1s.

    Args:
        config: Optional configuration. Defaults to the production constants
            (100 genomes of 1000 bits, 8% shuffle mutation, unseeded).
        on_generation: Optional callback receiving a GenerationSnapshot after
            every evaluation
        rng: Optional random source. If None, one is created from
            config.evolution.seed.

    Returns:
        EvolutionResult with the best genome, its fitness, the number of
        generations and the elapsed milliseconds

    Examples:
        >>> from onemax import solve, Config
        >>> config = Config.from_dict({
        ...     "evolution": {"population_size": 20, "genome_length": 32, "seed": 1},
        ...     "output": {"verbosity": "silent"},
        ... })
        >>> result = solve(config)
        >>> result.best_fitness
        32

        Following progress:
        >>> result = solve(config, on_generation=lambda s: print(s.best_fitness))
    """
    config = config or get_default_config()
    set_verbosity(config.output.verbosity)

    loop = EvolutionLoop(config.evolution, rng=rng)
    return loop.run(on_generation=on_generation)
