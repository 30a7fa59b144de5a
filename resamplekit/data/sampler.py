"""
Random index sampling.

Every draw goes through an explicit numpy Generator; there is no module
level random state. Callers pass a seed or a Generator and get the same
indices back for the same seed.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from resamplekit._exceptions import InvalidArgument

RandomState = Union[None, int, np.random.SeedSequence, np.random.Generator]


def as_generator(rng: RandomState = None) -> np.random.Generator:
    """Turn a seed into a Generator.

    Args:
        rng: None (fresh unseeded generator for this call), an int seed,
            a SeedSequence, or an existing Generator (returned as-is).

    Returns:
        numpy Generator.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, bool):
        raise InvalidArgument(f"`rng` must be a seed or a numpy Generator, got {rng!r}")
    if rng is None or isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return np.random.default_rng(rng)
    raise InvalidArgument(
        f"`rng` must be a seed or a numpy Generator, got {type(rng).__name__}"
    )


def sample_indices(
    population_size: int,
    k: int,
    replace: bool,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw k indices from range(population_size).

    Without replacement the result has no duplicates; in both modes the
    indices come back in draw order, unsorted.

    Args:
        population_size: Number of items to draw from.
        k: Number of indices to draw.
        replace: Sample with replacement.
        rng: Generator to draw from.

    Returns:
        int64 array of length k.
    """
    if k < 0:
        raise InvalidArgument(f"`k` must be non-negative, got {k}")
    if not replace and k > population_size:
        raise InvalidArgument(
            f"`k` must be less than or equal to the population size "
            f"({population_size}) when sampling without replacement, got {k}"
        )
    if k == 0:
        return np.empty(0, dtype=np.int64)
    if population_size == 0:
        raise InvalidArgument("Cannot sample from an empty population")
    return rng.choice(population_size, size=k, replace=replace).astype(np.int64)


def sample_from(
    units: np.ndarray,
    k: int,
    replace: bool,
    rng: np.random.Generator,
) -> np.ndarray:
    """Draw k elements of units (see sample_indices)."""
    return units[sample_indices(len(units), k, replace, rng)]
