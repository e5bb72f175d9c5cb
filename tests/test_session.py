# File: tests/test_session.py
"""
Test the session.py module (current bird + offspring workflow).
"""

import numpy as np
import pytest

from birdcraft.catalog import GOOD_BIRDS
from birdcraft.params import BirdParams
from birdcraft.seed import SeedError
from birdcraft.session import BirdLab


DEFAULT_SEED = "m.15.80.5.10.h.22.32.7.4.32.10.9.b.60.40.90.25.25.t.50.22.-5.40.80.c.100"


def test_new_lab_starts_with_default_bird():
    lab = BirdLab()
    assert lab.current == BirdParams()
    assert lab.seed == DEFAULT_SEED
    assert lab.offspring is None


def test_lab_copies_initial_params():
    start = BirdParams(beak_length=3.0)
    lab = BirdLab(start)
    lab.current.beak_length = 9.0
    assert start.beak_length == 3.0


def test_select_copies_child_into_current():
    lab = BirdLab()
    rng = np.random.default_rng(4)

    offspring = lab.new_offspring(rng)
    chosen = offspring.right.copy()
    current = lab.current

    result = lab.select('right')

    assert result is current, "Selection updates the current bird in place"
    assert lab.current == chosen
    assert lab.offspring is None


def test_select_requires_offspring_and_valid_side():
    lab = BirdLab()
    with pytest.raises(ValueError):
        lab.select('left')

    lab.new_offspring(np.random.default_rng(0))
    with pytest.raises(ValueError):
        lab.select('middle')


def test_load_seed_partial_apply():
    lab = BirdLab()
    with pytest.raises(SeedError):
        lab.load_seed("m.1.2.3.4.h.oops")

    assert lab.current.beak_length == 1.0
    assert lab.current.head_size == 22.0


def test_randomize_and_good_bird():
    lab = BirdLab()
    rng = np.random.default_rng(10)

    lab.randomize(rng)
    assert lab.current != BirdParams()
    assert lab.current.out_of_range() == []

    lab.load_good_bird(rng)
    assert lab.seed in GOOD_BIRDS


def test_export_stl_from_lab():
    lab = BirdLab()
    text = lab.export_stl().decode("ascii")
    assert text.startswith("solid bird")

    meshes = lab.meshes()
    assert len(meshes.head.faces) > 0 and len(meshes.body.faces) > 0
