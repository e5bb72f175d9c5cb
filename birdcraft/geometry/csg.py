# birdcraft/geometry/csg.py
"""
CSG KERNEL: Primitives, Transforms and Booleans
===============================================

PURPOSE:
--------
The whole bird is built from a tiny constructive-solid-geometry language:

    Primitives:  sphere, frustum (tapering cylinder), box
    Transforms:  translate, rotate, scale, mirror
    Operations:  union, difference, hull
    Cleanup:     renormalize, subdivide

Every function returns a NEW trimesh.Trimesh and leaves its inputs alone, so
shapes read like OpenSCAD-style expressions:

    eye = rotate(translate(scale(sphere(r), 1, 1, 0.5), 0, 0, d), 50, -40, 0)

CONVENTIONS:
------------
- Z is up.
- Angles are in degrees. rotate(x, y, z) turns about X first, then Y, then Z,
  all about the fixed world axes.
- Booleans run on the manifold engine (manifold3d); hulls use Qhull via scipy.
- Radii and scale factors at or below zero are replaced by a small epsilon,
  so degenerate parameters never produce zero-volume solids.
"""

from typing import Optional, Sequence

import numpy as np
import trimesh
from trimesh import transformations as tf

from ..config import CONFIG


def _positive(value: float) -> float:
    """Substitute the epsilon for a zero or negative radius or scale factor."""
    return value if value > 0 else CONFIG.epsilon_radius


def _transformed(mesh: trimesh.Trimesh, matrix: np.ndarray) -> trimesh.Trimesh:
    out = mesh.copy()
    out.apply_transform(matrix)
    return out


# =============================================================================
# Primitives
# =============================================================================

def sphere(
    radius: float,
    segments: Optional[int] = None,
    stacks: Optional[int] = None,
) -> trimesh.Trimesh:
    """UV sphere centered at the origin."""
    segments = segments or CONFIG.sphere_segments
    stacks = stacks or CONFIG.sphere_stacks
    return trimesh.creation.uv_sphere(radius=_positive(radius), count=[stacks, segments])


def frustum(
    radius_bottom: float,
    radius_top: float,
    height: float,
    sections: Optional[int] = None,
) -> trimesh.Trimesh:
    """
    Tapering cylinder along +Z, base centered at the origin.

    Built as the hull of its two end rings, which keeps it closed and convex
    even when one end shrinks to the epsilon radius.
    """
    sections = sections or CONFIG.cylinder_sections
    theta = np.linspace(0.0, 2.0 * np.pi, sections, endpoint=False)
    ring = np.column_stack([np.cos(theta), np.sin(theta), np.zeros_like(theta)])

    bottom = ring * _positive(radius_bottom)
    top = ring * _positive(radius_top)
    top[:, 2] = _positive(height)
    return trimesh.convex.convex_hull(np.vstack([bottom, top]))


def box(extents: Sequence[float]) -> trimesh.Trimesh:
    """Axis-aligned box centered at the origin."""
    return trimesh.creation.box(extents=[_positive(e) for e in extents])


# =============================================================================
# Transforms
# =============================================================================

def translate(mesh: trimesh.Trimesh, x: float, y: float, z: float) -> trimesh.Trimesh:
    return _transformed(mesh, tf.translation_matrix([x, y, z]))


def rotate(mesh: trimesh.Trimesh, x_deg: float, y_deg: float, z_deg: float) -> trimesh.Trimesh:
    angles = np.radians([x_deg, y_deg, z_deg])
    return _transformed(mesh, tf.euler_matrix(*angles, axes='sxyz'))


def scale(mesh: trimesh.Trimesh, x: float, y: float, z: float) -> trimesh.Trimesh:
    matrix = np.diag([_positive(x), _positive(y), _positive(z), 1.0])
    return _transformed(mesh, matrix)


def mirror(mesh: trimesh.Trimesh, normal: Sequence[float]) -> trimesh.Trimesh:
    """
    Reflect across the plane through the origin with the given normal.

    A reflection flips triangle winding; the result is renormalized so its
    normals point outward again.
    """
    return renormalize(_transformed(mesh, tf.reflection_matrix([0.0, 0.0, 0.0], normal)))


# =============================================================================
# Operations
# =============================================================================

def union(a: trimesh.Trimesh, b: trimesh.Trimesh) -> trimesh.Trimesh:
    return trimesh.boolean.union([a, b], engine=CONFIG.boolean_engine)


def difference(a: trimesh.Trimesh, b: trimesh.Trimesh) -> trimesh.Trimesh:
    """Subtract `b` from `a`."""
    return trimesh.boolean.difference([a, b], engine=CONFIG.boolean_engine)


def hull(*meshes: trimesh.Trimesh) -> trimesh.Trimesh:
    """Convex hull of the union of all given meshes."""
    points = np.vstack([m.vertices for m in meshes])
    return trimesh.convex.convex_hull(points)


def renormalize(mesh: trimesh.Trimesh) -> trimesh.Trimesh:
    """Make winding consistent and normals point outward (needed after booleans)."""
    out = mesh.copy()
    trimesh.repair.fix_normals(out, multibody=True)
    return out


def subdivide(mesh: trimesh.Trimesh) -> trimesh.Trimesh:
    """Split every triangle into four (one refinement level)."""
    return mesh.subdivide()
