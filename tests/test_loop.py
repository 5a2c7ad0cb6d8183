"""Tests for the generational loop."""

import pytest
import torch

from onemax.config import EvolutionConfig
from onemax.core.genome import as_population, fitness, random_population
from onemax.core.random_source import RandomSource
from onemax.evolution.loop import EvolutionLoop, EvolutionState, GenerationSnapshot
from onemax.evolution.mutation import ShuffleMutation
from onemax.evolution.operators import MutationStrategy


class RecordingMutation(MutationStrategy):
    """Shuffle mutation that remembers the fitness it saw before and after."""

    def __init__(self, rate: float):
        self.inner = ShuffleMutation(rate)
        self.calls = []

    def mutate(self, population, rng):
        before = fitness(population).clone()
        mutated = self.inner.mutate(population, rng)
        self.calls.append((before, fitness(population).clone(), mutated))
        return mutated


class TestStep:
    def test_step_keeps_invariants(self, small_config, rng):
        loop = EvolutionLoop(small_config, rng=rng)
        population = loop.initialize()
        loop.evaluate(population)

        for _ in range(25):
            scores = loop.step(population)

            assert population.shape == (20, 16)
            assert set(population.unique().tolist()) <= {0, 1}
            assert scores.tolist() == sorted(scores.tolist(), reverse=True)
            assert torch.equal(fitness(population), scores)
            assert loop.state == EvolutionState.EVALUATING

    def test_total_ones_conserved(self, small_config, rng):
        loop = EvolutionLoop(small_config, rng=rng)
        population = loop.initialize()
        total = int(fitness(population).sum())

        loop.evaluate(population)
        for _ in range(10):
            loop.step(population)
            assert int(fitness(population).sum()) == total

    def test_mutation_preserves_fitness(self, small_config, rng):
        mutation = RecordingMutation(rate=0.5)
        loop = EvolutionLoop(small_config, rng=rng, mutation=mutation)
        population = loop.initialize()
        loop.evaluate(population)

        for _ in range(10):
            loop.step(population)

        assert len(mutation.calls) == 10
        assert any(mutated for _, _, mutated in mutation.calls)
        for before, after, _ in mutation.calls:
            assert torch.equal(before, after)


class TestRun:
    def test_converges_to_all_ones(self, small_config):
        result = EvolutionLoop(small_config).run()

        assert result.converged
        assert result.stop_reason == "optimum"
        assert result.best_fitness == 16
        assert result.best_genome.tolist() == [1] * 16
        assert result.elapsed_ms >= 0
        assert result.seed == 7

    def test_history_and_callback(self, small_config):
        snapshots = []
        result = EvolutionLoop(small_config).run(on_generation=snapshots.append)

        assert len(snapshots) == result.generations + 1
        assert len(result.history) == len(snapshots)
        assert [s.generation for s in snapshots] == list(range(result.generations + 1))
        assert all(isinstance(s, GenerationSnapshot) for s in snapshots)

        # Only the final evaluation reports the optimum
        assert [s.solved for s in snapshots] == [False] * result.generations + [True]
        assert snapshots[-1].best_fitness == 16
        assert result.history[-1] == snapshots[-1].to_dict()

    def test_mean_fitness_constant(self, small_config):
        result = EvolutionLoop(small_config).run()

        means = {round(entry["mean_fitness"], 9) for entry in result.history}
        assert len(means) == 1

    def test_same_seed_same_run(self, small_config):
        first = EvolutionLoop(small_config).run()
        second = EvolutionLoop(small_config).run()

        assert first.generations == second.generations
        assert first.history == second.history
        assert torch.equal(first.best_genome, second.best_genome)

    def test_ends_terminated(self, small_config):
        loop = EvolutionLoop(small_config)
        loop.run()
        assert loop.state == EvolutionState.TERMINATED

    def test_already_solved_population(self):
        config = EvolutionConfig(population_size=4, genome_length=5, seed=0)
        population = as_population([[0, 0, 0, 0, 0], [1, 1, 1, 1, 1], [1, 0, 0, 0, 0], [0, 1, 1, 0, 0]])

        result = EvolutionLoop(config).run(population)

        assert result.generations == 0
        assert result.best_fitness == 5
        assert population[0].tolist() == [1, 1, 1, 1, 1]

    def test_generation_cap(self):
        # Three 1s in total: the optimum of length 4 is unreachable
        config = EvolutionConfig(population_size=4, genome_length=4, seed=5, max_generations=12)
        population = as_population([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 0]])

        result = EvolutionLoop(config).run(population)

        assert not result.converged
        assert result.stop_reason == "max_generations"
        assert result.generations == 12
        assert len(result.history) == 13
        assert result.best_fitness < 4

    def test_rejects_bad_population(self, small_config, rng):
        loop = EvolutionLoop(small_config)
        with pytest.raises(ValueError):
            loop.run(random_population(20, 15, rng))

    def test_rng_overrides_seed(self, small_config):
        rng = RandomSource(seed=42)
        result = EvolutionLoop(small_config, rng=rng).run()
        assert result.seed == 42
