"""Evolution module: the generational loop and its operators."""

from onemax.evolution.operators import (
    SelectionStrategy,
    CrossoverStrategy,
    MutationStrategy,
)
from onemax.evolution.evaluation import FitnessEvaluator, population_diversity
from onemax.evolution.selection import AdjacentPairSelection, reassemble
from onemax.evolution.crossover import SinglePointCrossover, single_point_crossover
from onemax.evolution.mutation import ShuffleMutation
from onemax.evolution.loop import (
    EvolutionLoop,
    EvolutionResult,
    EvolutionState,
    GenerationSnapshot,
)

__all__ = [
    "SelectionStrategy",
    "CrossoverStrategy",
    "MutationStrategy",
    "FitnessEvaluator",
    "population_diversity",
    "AdjacentPairSelection",
    "reassemble",
    "SinglePointCrossover",
    "single_point_crossover",
    "ShuffleMutation",
    "EvolutionLoop",
    "EvolutionResult",
    "EvolutionState",
    "GenerationSnapshot",
]
