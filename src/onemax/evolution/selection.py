"""Selection of mating pairs, and reassembly of pairs into a population."""

from __future__ import annotations

from torch import Tensor

from onemax.evolution.operators import SelectionStrategy


class AdjacentPairSelection(SelectionStrategy):
    """
    Assortative pairing of neighbours in fitness order.

    Pairs rows (0, 1), (2, 3), (4, 5), ... of the population. Since the
    population has just been sorted, each individual mates with the one of
    closest fitness.
    """

    def pair(self, population: Tensor) -> Tensor:
        if population.dim() != 2:
            raise ValueError(
                f"Population must be a 2-D tensor, got {population.dim()} dimensions"
            )

        size, length = population.shape
        if size % 2:
            raise ValueError(f"Cannot pair an odd number of individuals ({size})")

        return population.reshape(size // 2, 2, length).clone()


def reassemble(pairs: Tensor) -> Tensor:
    """
    Flatten pairs back into a population.

    Pair order is kept and each pair contributes its first then its second
    genome, so P pairs always give exactly 2P rows.

    Args:
        pairs: Tensor of shape (P, 2, L)

    Returns:
        Tensor of shape (2P, L)
    """
    if pairs.dim() != 3 or pairs.shape[1] != 2:
        raise ValueError(f"Pairs must have shape (P, 2, L), got {tuple(pairs.shape)}")

    n_pairs, _, length = pairs.shape
    return pairs.reshape(n_pairs * 2, length)
