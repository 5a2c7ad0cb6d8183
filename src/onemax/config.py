"""
Configuration schema for the OneMax evolution engine.

All settings are Pydantic models, so invalid values are rejected when the
configuration is built rather than partway through a run.

Key configuration areas:
- EvolutionConfig: Population shape, mutation rate, seeding and the optional
  generation cap
- OutputConfig: Logging verbosity

The command-line entry point always runs with ``get_default_config()``: a
population of 100 genomes of 1000 bits with an 8% shuffle-mutation rate.
Smaller shapes are only meant for tests and experiments driven from Python.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


POPULATION_SIZE = 100
GENOME_LENGTH = 1000
MUTATION_RATE = 0.08


class EvolutionConfig(BaseModel):
    """
    Configuration for the generational loop.

    Population Settings:
    - population_size: Number of genomes (N). Must be even, since selection
      pairs adjacent genomes.
    - genome_length: Bits per genome (L). The optimum fitness equals L.

    Operators:
    - mutation_rate: Per-genome probability of having its bits shuffled each
      generation.

    Run Control:
    - max_generations: Optional safety cap. ``None`` (default) runs until the
      optimum is found, however long that takes.
    - seed: Seed for the random source. ``None`` draws one from OS entropy;
      the seed actually used is reported on the result.
    """

    population_size: int = Field(default=POPULATION_SIZE, ge=2)
    genome_length: int = Field(default=GENOME_LENGTH, ge=1)
    mutation_rate: float = Field(default=MUTATION_RATE, ge=0, le=1)
    max_generations: int | None = Field(default=None, ge=1)
    seed: int | None = Field(default=None, ge=0)

    class Config:
        extra = "forbid"  # Prevent typos in config dicts

    @field_validator("population_size")
    @classmethod
    def _population_size_is_even(cls, value: int) -> int:
        if value % 2:
            raise ValueError(
                f"population_size must be even to form adjacent pairs, got {value}"
            )
        return value


class OutputConfig(BaseModel):
    """Configuration for diagnostic output."""
    verbosity: Literal["silent", "minimal", "normal", "verbose", "debug"] = "normal"

    class Config:
        extra = "forbid"


class Config(BaseModel):
    """
    Main configuration for the OneMax evolution engine.

    Usage Patterns:

    **Default Configuration** (what the CLI runs):
    >>> config = Config()
    >>> config.evolution.population_size, config.evolution.genome_length
    (100, 1000)

    **Small, reproducible runs**:
    >>> config = Config.from_dict({
    ...     "evolution": {"population_size": 10, "genome_length": 32, "seed": 7},
    ...     "output": {"verbosity": "silent"},
    ... })
    """

    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        extra = "forbid"

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Load configuration from a dictionary."""
        return cls(**data)

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return self.model_dump()


def get_default_config() -> Config:
    """Get the fixed production configuration (N=100, L=1000, p=0.08)."""
    return Config()
