# birdcraft - Procedural Bird Generation and Breeding
"""
BIRDCRAFT: A Parametric Bird Generator
======================================

This package provides:
- A 22-parameter bird shape descriptor
- Mesh generation (head + body) with CSG primitives and hulls
- Compact text seeds for sharing birds
- Breeding (crossover + mutation) and randomization
- ASCII STL export for 3D printing

ARCHITECTURE:
-------------
    config.py       Tuning constants (CONFIG)
    params.py       BirdParams and the field table
    seed.py         Seed encode/decode
    catalog.py      Known-good seeds
    breed.py        Randomize, breed, offspring pairs
    geometry/       CSG kernel and head/body recipes
    export.py       ASCII STL export and merge
    session.py      Current bird + offspring state for front ends
    viz/            Plotly previews
"""

from .params import BirdParams, FIELDS
from .seed import encode_seed, decode_seed, apply_seed, SeedError
from .breed import breed, breed_offspring, randomize, random_params, Offspring
from .catalog import GOOD_BIRDS, pick_good_bird
from .geometry import build_bird, build_head, build_body
from .export import export_bird_stl

__version__ = "0.1.0"
