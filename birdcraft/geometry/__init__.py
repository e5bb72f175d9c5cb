# birdcraft/geometry - Bird Mesh Generation
"""
GEOMETRY: Parametric Bird Meshes
================================

This package turns a BirdParams vector into triangle meshes.

Modules:
--------
- csg:  primitive/boolean kernel over trimesh (sphere, frustum, box,
        union, difference, hull, renormalize, ...)
- bird: the head and body recipes

USAGE:
------
    from birdcraft.geometry import build_bird
    from birdcraft.params import BirdParams

    meshes = build_bird(BirdParams())
    meshes.head, meshes.body   # trimesh.Trimesh each
"""

from .bird import (
    BirdMeshes, build_bird, build_head, build_body, body_envelope, flatten_base, cut_height,
)

__all__ = [
    'BirdMeshes', 'build_bird', 'build_head', 'build_body',
    'body_envelope', 'flatten_base', 'cut_height',
]
