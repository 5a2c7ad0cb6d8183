"""Main generational loop for OneMax."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from torch import Tensor

from onemax.config import EvolutionConfig
from onemax.core.genome import check_population, random_population
from onemax.core.random_source import RandomSource
from onemax.evolution.crossover import SinglePointCrossover
from onemax.evolution.evaluation import FitnessEvaluator, population_diversity
from onemax.evolution.mutation import ShuffleMutation
from onemax.evolution.operators import CrossoverStrategy, MutationStrategy, SelectionStrategy
from onemax.evolution.selection import AdjacentPairSelection, reassemble
from onemax.utils.logging import LogLevel, log_event, log_generation


class EvolutionState(Enum):
    """Stages of the generational loop."""
    INITIALIZING = "initializing"
    EVALUATING = "evaluating"
    SELECTING = "selecting"
    RECOMBINING = "recombining"
    MUTATING = "mutating"
    TERMINATED = "terminated"


@dataclass
class GenerationSnapshot:
    """Statistics of the population right after one evaluation."""

    generation: int
    best_fitness: int
    mean_fitness: float
    diversity: float
    mutated: int
    solved: bool

    def to_dict(self) -> dict:
        return {
            "generation": self.generation,
            "best_fitness": self.best_fitness,
            "mean_fitness": self.mean_fitness,
            "diversity": self.diversity,
            "mutated": self.mutated,
            "solved": self.solved,
        }


@dataclass
class EvolutionResult:
    """
    Result of the evolution process.

    Attributes:
        generations: Generations bred before the run stopped
        history: One ``GenerationSnapshot.to_dict()`` per evaluation, from
            generation 0 through the final one. It grows with the generation
            count, which is unbounded unless ``max_generations`` is set.
    """

    best_genome: Tensor
    best_fitness: int
    generations: int
    elapsed_ms: int
    seed: int
    history: List[dict] = field(default_factory=list)
    converged: bool = False
    stop_reason: str = ""


class EvolutionLoop:
    """
    Generational genetic algorithm for OneMax.

    Each generation runs the same fixed pipeline on a population of shape
    (N, L):

    1. **Selection**: Pair neighbours in fitness order
    2. **Recombination**: Single-point crossover on every pair, then flatten
       the offspring back into a population
    3. **Mutation**: Shuffle the genes of a few individuals
    4. **Evaluation**: Sort by descending fitness

    The loop stops as soon as the best individual is all 1s. There is no
    generation limit unless ``config.max_generations`` is set.

    Example:
        >>> config = EvolutionConfig(population_size=20, genome_length=64, seed=3)
        >>> result = EvolutionLoop(config).run()
        >>> result.best_fitness
        64
    """

    def __init__(
        self,
        config: EvolutionConfig,
        rng: RandomSource | None = None,
        selection: SelectionStrategy | None = None,
        crossover: CrossoverStrategy | None = None,
        mutation: MutationStrategy | None = None,
    ):
        """
        Initialize the loop.

        Args:
            config: Population shape, mutation rate, seed and optional cap
            rng: Random source for every stage. If None, one is created from
                config.seed.
            selection: Custom selection strategy. Defaults to
                AdjacentPairSelection.
            crossover: Custom crossover strategy. Defaults to
                SinglePointCrossover.
            mutation: Custom mutation strategy. Defaults to ShuffleMutation
                at config.mutation_rate.
        """
        self.config = config
        self.rng = rng if rng is not None else RandomSource(config.seed)

        self.evaluator = FitnessEvaluator()
        self.selection = selection if selection is not None else AdjacentPairSelection()
        self.crossover = crossover if crossover is not None else SinglePointCrossover()
        self.mutation = mutation if mutation is not None else ShuffleMutation(config.mutation_rate)

        # State
        self.state = EvolutionState.INITIALIZING
        self.last_mutated: List[int] = []

    def initialize(self) -> Tensor:
        """Create a random population of the configured shape."""
        self._enter(EvolutionState.INITIALIZING)
        return random_population(
            self.config.population_size,
            self.config.genome_length,
            self.rng,
        )

    def evaluate(self, population: Tensor) -> Tensor:
        """Sort the population in place; return the sorted fitness."""
        self._enter(EvolutionState.EVALUATING)
        return self.evaluator.evaluate(population)

    def step(self, population: Tensor) -> Tensor:
        """
        Run one generation on an evaluated population, in place.

        Returns:
            The fitness of each row after the closing evaluation
        """
        self._enter(EvolutionState.SELECTING)
        pairs = self.selection.pair(population)

        self._enter(EvolutionState.RECOMBINING)
        offspring = reassemble(self.crossover.crossover(pairs, self.rng))
        if offspring.shape != population.shape:
            raise ValueError(
                f"Recombination changed the population shape from "
                f"{tuple(population.shape)} to {tuple(offspring.shape)}"
            )
        population.copy_(offspring)

        self._enter(EvolutionState.MUTATING)
        self.last_mutated = self.mutation.mutate(population, self.rng)

        return self.evaluate(population)

    def run(
        self,
        population: Tensor | None = None,
        on_generation: Optional[Callable[[GenerationSnapshot], None]] = None,
    ) -> EvolutionResult:
        """
        Evolve until an individual reaches fitness L.

        Args:
            population: Optional starting population of shape (N, L). It is
                validated and then modified in place. If None, a random one
                is created.
            on_generation: Called with a GenerationSnapshot after every
                evaluation, including the initial one (generation 0) and the
                final one.

        Returns:
            EvolutionResult with a copy of the best genome, the number of
            generations run after the initial evaluation, and the wall time
            in milliseconds
        """
        start = time.perf_counter()
        genome_length = self.config.genome_length

        if population is None:
            population = self.initialize()
        else:
            self._enter(EvolutionState.INITIALIZING)
            check_population(population, self.config.population_size, genome_length)

        log_event(
            "EVOLUTION_START",
            level=LogLevel.NORMAL,
            population=self.config.population_size,
            genome_length=genome_length,
            mutation_rate=self.config.mutation_rate,
            seed=self.rng.seed,
        )

        history = []
        generation = 0
        self.last_mutated = []
        scores = self.evaluate(population)

        while True:
            snapshot = self._snapshot(generation, population, scores)
            history.append(snapshot.to_dict())
            log_generation(
                gen=generation,
                best_fitness=snapshot.best_fitness,
                mean_fitness=snapshot.mean_fitness,
                diversity=f"{snapshot.diversity:.3f}",
                mutated=snapshot.mutated,
            )
            if on_generation is not None:
                on_generation(snapshot)

            if snapshot.solved:
                stop_reason = "optimum"
                break

            if self.config.max_generations is not None and generation >= self.config.max_generations:
                stop_reason = "max_generations"
                break

            scores = self.step(population)
            generation += 1

        self._enter(EvolutionState.TERMINATED)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        converged = stop_reason == "optimum"

        log_event(
            "CONVERGED" if converged else "MAX_GENERATIONS",
            level=LogLevel.NORMAL,
            generations=generation,
            best=int(scores[0]),
            elapsed_ms=elapsed_ms,
        )

        return EvolutionResult(
            best_genome=population[0].clone(),
            best_fitness=int(scores[0]),
            generations=generation,
            elapsed_ms=elapsed_ms,
            seed=self.rng.seed,
            history=history,
            converged=converged,
            stop_reason=stop_reason,
        )

    def _snapshot(self, generation: int, population: Tensor, scores: Tensor) -> GenerationSnapshot:
        best = int(scores[0])
        return GenerationSnapshot(
            generation=generation,
            best_fitness=best,
            mean_fitness=float(scores.double().mean()),
            diversity=population_diversity(population),
            mutated=len(self.last_mutated),
            solved=best == self.config.genome_length,
        )

    def _enter(self, state: EvolutionState) -> None:
        log_event("STATE", level=LogLevel.DEBUG, state=state.value)
        self.state = state
