# birdcraft/catalog.py
"""
CATALOG: KNOWN-GOOD BIRDS
=========================

Randomizing all 22 parameters independently produces plenty of odd birds.
This catalog keeps a short list of seeds that are known to look good, so a
caller can start from a pleasing bird instead of the numeric default or a
fully random one.

The first entry is the default bird.
"""

from typing import Tuple

import numpy as np

from .params import BirdParams
from .seed import decode_seed


GOOD_BIRDS: Tuple[str, ...] = (
    "m.15.80.5.10.h.22.32.7.4.32.10.9.b.60.40.90.25.25.t.50.22.-5.40.80.c.100",
    "m.8.60.0.10.h.18.25.5.0.28.0.15.b.45.36.110.20.30.t.70.14.0.55.40.c.100",
    "m.30.45.2.60.h.16.40.4.-3.45.-15.-20.b.80.32.70.30.20.t.90.10.10.30.20.c.60",
    "m.4.90.8.150.h.30.10.10.6.20.20.0.b.40.50.140.15.40.t.25.30.-10.70.150.c.100",
    "m.20.70.3.30.h.24.35.8.2.50.-25.25.b.70.44.95.28.28.t.60.20.-15.10.90.c.80",
    "m.12.55.10.120.h.26.20.12.-8.36.30.-10.b.55.48.120.22.35.t.40.26.5.60.120.c.100",
    "m.45.35.0.10.h.14.45.3.0.60.5.-45.b.90.28.60.35.15.t.95.8.0.20.30.c.40",
    "m.6.100.15.200.h.36.5.16.10.16.-30.35.b.30.56.150.10.45.t.15.40.20.85.180.c.100",
    "m.18.75.4.40.h.20.30.6.-12.40.40.5.b.65.38.85.26.26.t.55.24.-30.45.70.c.20",
    "m.25.65.6.80.h.28.15.9.5.24.-10.-30.b.50.52.130.18.38.t.80.18.25.-20.60.c.100",
    "m.10.85.1.20.h.19.38.11.0.55.15.20.b.75.34.75.32.22.t.65.16.-20.75.100.c.0",
)


def pick_good_bird(rng: np.random.Generator) -> BirdParams:
    """Pick one catalog bird uniformly at random."""
    return decode_seed(GOOD_BIRDS[rng.integers(len(GOOD_BIRDS))])
