"""Pytest configuration and fixtures."""

import pytest
import torch

from onemax.utils.logging import set_verbosity, LogLevel


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep diagnostic logging out of test output."""
    set_verbosity(LogLevel.SILENT)
    yield
    set_verbosity(LogLevel.NORMAL)


@pytest.fixture
def rng():
    """A seeded random source."""
    from onemax.core.random_source import RandomSource

    return RandomSource(seed=1234)


@pytest.fixture
def small_config():
    """Small evolution configuration for testing."""
    from onemax.config import EvolutionConfig

    return EvolutionConfig(
        population_size=20,
        genome_length=16,
        seed=7,
        max_generations=5000,
    )


@pytest.fixture
def sample_population(rng):
    """A random (10, 32) population."""
    from onemax.core.genome import random_population

    return random_population(10, 32, rng)


@pytest.fixture
def parents():
    """Two distinguishable parents of length 8."""
    parent_a = torch.tensor([1, 1, 1, 1, 1, 1, 1, 1], dtype=torch.int8)
    parent_b = torch.tensor([0, 0, 0, 0, 0, 0, 0, 0], dtype=torch.int8)
    return parent_a, parent_b
