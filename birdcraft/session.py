# birdcraft/session.py
"""
Bird lab state.

Holds the "current" bird and the latest pair of offspring, and wires the
core operations together the way an interactive front end uses them:
breed two children, show them side by side, let the user pick one, copy or
paste the seed, save an STL.

Keeps no references to UI objects; any front end (web, desktop, notebook)
can drive it.
"""

from typing import Optional

import numpy as np

from .breed import Offspring, breed_offspring, randomize
from .catalog import pick_good_bird
from .export import export_bird_stl
from .geometry import BirdMeshes, build_bird
from .params import BirdParams
from .seed import apply_seed, encode_seed


class BirdLab:
    """Typed state for one user's bird breeding session."""

    SIDES = ('left', 'right')

    def __init__(self, params: Optional[BirdParams] = None):
        self.current = params.copy() if params is not None else BirdParams()
        self.offspring: Optional[Offspring] = None

    @property
    def seed(self) -> str:
        return encode_seed(self.current)

    def load_seed(self, seed: str) -> BirdParams:
        """
        Apply a pasted seed to the current bird.

        Raises SeedError; sections decoded before the bad one stay applied.
        """
        self.offspring = None
        return apply_seed(self.current, seed)

    def randomize(self, rng: np.random.Generator) -> BirdParams:
        self.offspring = None
        return randomize(self.current, rng)

    def load_good_bird(self, rng: np.random.Generator) -> BirdParams:
        self.offspring = None
        return self.current.copy_from(pick_good_bird(rng))

    def new_offspring(self, rng: np.random.Generator) -> Offspring:
        self.offspring = breed_offspring(self.current, rng)
        return self.offspring

    def select(self, side: str) -> BirdParams:
        """Make the left or right child the new current bird."""
        if side not in self.SIDES:
            raise ValueError(f"Unknown side: {side}. Use 'left' or 'right'.")
        if self.offspring is None:
            raise ValueError("No offspring to select from. Call new_offspring() first.")
        self.current.copy_from(getattr(self.offspring, side))
        self.offspring = None
        return self.current

    def meshes(self) -> BirdMeshes:
        return build_bird(self.current)

    def export_stl(self) -> bytes:
        return export_bird_stl(self.current)
