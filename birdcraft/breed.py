# birdcraft/breed.py
"""
BREED: Genetic Variation of Birds
=================================

PURPOSE:
--------
Produce new birds from existing ones:

- randomize(): sample every parameter uniformly from its interval
- breed(): trait-wise crossover of two parents plus occasional mutation
- breed_offspring(): the left/right pair of children shown side by side
  so the user can pick which one becomes the new current bird

CROSSOVER:
----------
The child starts as a copy of the mate. For each trait a "dominance"
probability is drawn from [0.4, 0.6]; with that probability the mate's value
is kept, otherwise the parent's value is taken. Children are therefore a
near-even blend across traits, weighted a little differently trait by trait.
A trait is always one parent's value, never an interpolation.

MUTATION:
---------
With probability `mutation_rate` (0.05) a trait is multiplied by a factor
drawn from [0.05, 0.95). Mutation only ever shrinks a trait's magnitude.

RANDOMNESS:
-----------
All functions take an explicit np.random.Generator. Use
np.random.default_rng(seed) for reproducible breeding.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .config import CONFIG
from .params import BirdParams, FIELDS


@dataclass
class Offspring:
    """The two children offered after a breeding round."""
    left: BirdParams
    right: BirdParams


def randomize(params: BirdParams, rng: np.random.Generator) -> BirdParams:
    """Overwrite every field with a uniform draw from its interval (in place)."""
    for entry in FIELDS:
        entry.set(params, rng.uniform(entry.low, entry.high))
    return params


def random_params(rng: np.random.Generator) -> BirdParams:
    return randomize(BirdParams(), rng)


def breed(
    parent: BirdParams,
    mate: BirdParams,
    rng: np.random.Generator,
    mutation_rate: Optional[float] = None,
) -> BirdParams:
    """
    Breed two birds into a new child.

    Parameters:
    -----------
    parent : BirdParams
        First parent; each trait replaces the mate's with probability 1 - dominance
    mate : BirdParams
        Second parent; the child starts as a copy of it
    rng : np.random.Generator
        Source of randomness
    mutation_rate : float, optional
        Per-trait mutation probability (default: CONFIG.mutation_rate)

    Returns:
    --------
    BirdParams
        A new bird. Neither parent is modified.
    """
    if mutation_rate is None:
        mutation_rate = CONFIG.mutation_rate
    dominance_low, dominance_high = CONFIG.dominance_range
    factor_low, factor_high = CONFIG.mutation_factor_range

    child = mate.copy()
    for entry in FIELDS:
        dominance = rng.uniform(dominance_low, dominance_high)
        if rng.random() >= dominance:
            entry.set(child, entry.get(parent))

        if rng.random() < mutation_rate:
            entry.set(child, entry.get(child) * rng.uniform(factor_low, factor_high))

    return child


def breed_offspring(current: BirdParams, rng: np.random.Generator) -> Offspring:
    """Breed `current` with two freshly randomized mates, one child per side."""
    left = breed(current, random_params(rng), rng)
    right = breed(current, random_params(rng), rng)
    return Offspring(left=left, right=right)
