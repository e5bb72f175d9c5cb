# File: tests/test_csg.py
"""
Test the geometry/csg.py kernel (primitives, transforms, booleans).
"""

import numpy as np
import pytest

from birdcraft.config import CONFIG
from birdcraft.geometry.csg import (
    sphere, frustum, box, translate, rotate, scale, mirror,
    union, difference, hull, renormalize, subdivide,
)


def test_sphere_is_closed_volume():
    ball = sphere(5.0)

    assert ball.is_watertight
    assert ball.volume > 0
    assert np.allclose(ball.extents, 10.0, rtol=1e-2)


def test_zero_radius_is_clamped_to_epsilon():
    ball = sphere(0.0)
    assert ball.volume > 0
    assert np.allclose(ball.extents, 2 * CONFIG.epsilon_radius, rtol=1e-2)


def test_small_positive_factors_are_not_clamped():
    cube = box([10.0, 10.0, 10.0])

    assert scale(cube, 0.1, 1.0, 1.0).extents[0] == pytest.approx(1.0)
    assert scale(cube, 0.05, 1.0, 1.0).extents[0] == pytest.approx(0.5)
    assert np.allclose(sphere(0.05).extents, 0.1, rtol=1e-2)


def test_sphere_resolution_follows_resolution_unit():
    assert CONFIG.sphere_segments == CONFIG.resolution_unit
    assert CONFIG.sphere_stacks == 2 * CONFIG.resolution_unit


def test_frustum_tapers_along_z():
    cone = frustum(4.0, 0.0, 2.0)

    assert cone.is_watertight
    assert np.isclose(cone.bounds[0][2], 0.0)
    assert np.isclose(cone.bounds[1][2], 2.0)
    assert np.isclose(cone.extents[0], 8.0)

    top = cone.vertices[np.isclose(cone.vertices[:, 2], 2.0)]
    assert np.abs(top[:, :2]).max() <= CONFIG.epsilon_radius + 1e-9


def test_transforms_return_new_meshes():
    ball = sphere(1.0)
    before = ball.vertices.copy()

    moved = translate(ball, 5.0, 0.0, 0.0)

    assert np.allclose(ball.vertices, before), "Input mesh must not change"
    assert np.allclose(moved.centroid, [5.0, 0.0, 0.0], atol=1e-4)


def test_rotate_order_is_x_then_y_then_z():
    """
    rotate(0, 90, 0) sends +X to -Z; rotate(90, 90, 0) sends +Y to +X.
    """
    ball = translate(sphere(1.0), 10.0, 0.0, 0.0)
    assert np.allclose(rotate(ball, 0, 90, 0).centroid, [0.0, 0.0, -10.0], atol=1e-4)
    assert np.allclose(rotate(ball, 0, 0, 90).centroid, [0.0, 10.0, 0.0], atol=1e-4)

    ball_y = translate(sphere(1.0), 0.0, 10.0, 0.0)
    assert np.allclose(rotate(ball_y, 90, 90, 0).centroid, [10.0, 0.0, 0.0], atol=1e-4)


def test_scale_per_axis():
    squashed = scale(sphere(2.0), 1.0, 1.0, 0.5)
    assert np.allclose(squashed.extents, [4.0, 4.0, 2.0], rtol=1e-2)


def test_mirror_keeps_outward_normals():
    blob = translate(scale(sphere(2.0), 2.0, 1.0, 1.0), 0.0, 5.0, 0.0)
    mirrored = mirror(blob, [0.0, 1.0, 0.0])

    assert mirrored.volume > 0
    assert np.isclose(mirrored.volume, blob.volume)
    assert np.allclose(mirrored.centroid, [0.0, -5.0, 0.0], atol=1e-4)


def test_union_and_difference():
    a = sphere(5.0)
    b = translate(sphere(5.0), 5.0, 0.0, 0.0)

    joined = union(a, b)
    assert a.volume < joined.volume < a.volume + b.volume

    cut = difference(a, translate(box([20.0, 20.0, 20.0]), 0.0, 0.0, -10.0))
    assert cut.bounds[0][2] > -1e-3
    assert cut.volume < a.volume * 0.6


def test_hull_wraps_all_inputs():
    a = sphere(2.0)
    b = translate(sphere(2.0), 20.0, 0.0, 0.0)

    wrapped = hull(a, b)

    assert wrapped.is_watertight
    assert np.allclose(wrapped.bounds, [[-2.0, -2.0, -2.0], [22.0, 2.0, 2.0]], atol=0.05)
    assert wrapped.volume > a.volume + b.volume


def test_renormalize_fixes_inverted_mesh():
    ball = sphere(3.0)
    ball.invert()
    assert ball.volume < 0

    fixed = renormalize(ball)
    assert fixed.volume > 0


def test_subdivide_quadruples_faces():
    ball = sphere(3.0)
    assert len(subdivide(ball).faces) == 4 * len(ball.faces)
