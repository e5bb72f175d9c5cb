# birdcraft/config.py
"""
Generator configuration and tuning constants.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class BirdConfig:
    """Global generator configuration."""

    # Tessellation
    resolution_unit: int = 20
    eye_resolution_divisor: int = 2  # eyes use half the skull resolution
    cylinder_sections: int = 20

    # Geometry
    epsilon_radius: float = 0.1  # stands in for a zero radius/scale
    taper_height: float = 1.0  # height of beak and tail skeleton cones
    beak_tilt_deg: float = 15.0
    eye_rotation_deg: Tuple[float, float, float] = (50.0, -40.0, 0.0)
    eye_flatten: float = 0.5
    head_scale: float = 1.1
    cutter_scale: float = 4.0
    base_flat_disabled: float = -100.0
    boolean_engine: str = "manifold"

    # Breeding
    dominance_range: Tuple[float, float] = (0.4, 0.6)
    mutation_rate: float = 0.05
    mutation_factor_range: Tuple[float, float] = (0.05, 0.95)

    # Export
    stl_name: str = "bird"
    head_stl_name: str = "head"
    stl_filename: str = "coolbird.stl"

    @property
    def sphere_segments(self) -> int:
        return self.resolution_unit

    @property
    def sphere_stacks(self) -> int:
        return self.resolution_unit * 2


# Global config instance
CONFIG = BirdConfig()
