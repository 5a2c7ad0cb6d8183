"""Explicit random source shared by every stage of the evolution loop."""

from __future__ import annotations

import torch
from torch import Tensor

from onemax.core.genome import GENE_DTYPE


class RandomSource:
    """
    Wraps a ``torch.Generator`` so that every random draw in a run comes from
    one explicitly passed object instead of global RNG state.

    Stages draw from it sequentially, so the same seed always reproduces the
    same run. Tests can subclass it and override individual draws to script
    an exact sequence of bits, crossover points or mutation trials.

    Attributes:
        generator: The underlying CPU generator
        seed: The seed in use. When constructed without one, this is the seed
            drawn from OS entropy, so the run can still be replayed.

    Example:
        >>> rng = RandomSource(seed=42)
        >>> rng.bits((4, 8)).shape
        torch.Size([4, 8])
    """

    def __init__(self, seed: int | None = None):
        self.generator = torch.Generator()
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.generator.manual_seed(seed)
            self.seed = seed

    def bits(self, shape: tuple[int, ...]) -> Tensor:
        """Uniform random 0/1 genes."""
        return torch.randint(0, 2, shape, generator=self.generator).to(GENE_DTYPE)

    def crossover_points(self, count: int, length: int) -> Tensor:
        """``count`` independent points, each uniform in [0, length)."""
        return torch.randint(0, length, (count,), generator=self.generator)

    def trials(self, count: int) -> Tensor:
        """``count`` independent floats, uniform in [0, 1)."""
        return torch.rand(count, generator=self.generator)

    def permutation(self, length: int) -> Tensor:
        """A uniformly random permutation of ``range(length)``."""
        return torch.randperm(length, generator=self.generator)
