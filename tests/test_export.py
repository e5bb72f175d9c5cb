# File: tests/test_export.py
"""
Test the export.py module (ASCII STL rendering and the head/body merge).
"""

import numpy as np
import pytest

from birdcraft.export import mesh_to_stl, merge_stl, count_facets, export_bird_stl
from birdcraft.geometry import build_bird
from birdcraft.geometry.csg import box
from birdcraft.params import BirdParams


def solid_headers(text):
    return [line for line in text.splitlines() if line.startswith("solid")]


def test_mesh_to_stl_structure():
    cube = box([2.0, 2.0, 2.0])
    text = mesh_to_stl(cube, "head")
    lines = text.splitlines()

    assert lines[0] == "solid head"
    assert lines[-1] == "endsolid head"
    assert count_facets(text) == len(cube.faces) == 12
    assert text.count("outer loop") == 12
    assert text.count("endloop") == 12
    assert text.count("endfacet") == 12
    assert sum(1 for line in lines if line.strip().startswith("vertex")) == 36


def test_mesh_to_stl_values_parse_back():
    cube = box([2.0, 4.0, 6.0])
    text = mesh_to_stl(cube, "box")

    vertices = np.array([
        [float(v) for v in line.split()[1:]]
        for line in text.splitlines() if line.strip().startswith("vertex")
    ])
    assert np.allclose(vertices.min(axis=0), [-1.0, -2.0, -3.0])
    assert np.allclose(vertices.max(axis=0), [1.0, 2.0, 3.0])


def test_merge_stl_splices_facets():
    body_stl = mesh_to_stl(box([2.0, 2.0, 2.0]), "bird")
    head_stl = mesh_to_stl(box([1.0, 1.0, 1.0]), "head")

    merged = merge_stl(body_stl, head_stl)

    assert solid_headers(merged) == ["solid bird"]
    assert merged.rstrip().endswith("endsolid bird")
    assert merged.count("endsolid") == 1
    assert "head" not in merged
    assert count_facets(merged) == 24


def test_export_bird_stl():
    """
    The merged export holds every head and body facet under one solid.
    """
    params = BirdParams()
    meshes = build_bird(params)
    head_facets = count_facets(mesh_to_stl(meshes.head, "head"))
    body_facets = count_facets(mesh_to_stl(meshes.body, "bird"))

    stl_bytes = export_bird_stl(params)

    assert isinstance(stl_bytes, bytes)
    text = stl_bytes.decode("ascii")
    assert solid_headers(text) == ["solid bird"]
    assert text.count("endsolid") == 1
    assert text.rstrip().endswith("endsolid bird")
    assert count_facets(text) == head_facets + body_facets

    print(f"✓ Exported {count_facets(text)} facets")
