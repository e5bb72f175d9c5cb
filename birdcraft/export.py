# birdcraft/export.py
"""
Export: renders bird meshes as ASCII STL.

The head and body are exported as separate STL documents and then merged at
the text level into one solid named "bird": the body's facets, then the
head's facets, then a single `endsolid bird`. No geometric union is done, so
both parts keep their own triangles.
"""

import logging

import trimesh

from .config import CONFIG
from .geometry import build_bird
from .params import BirdParams

logger = logging.getLogger(__name__)


def mesh_to_stl(mesh: trimesh.Trimesh, name: str) -> str:
    """Render a mesh as an ASCII STL document named `name`."""
    lines = [f"solid {name}"]
    for normal, triangle in zip(mesh.face_normals, mesh.triangles):
        lines.append(f"  facet normal {normal[0]:e} {normal[1]:e} {normal[2]:e}")
        lines.append("    outer loop")
        for vertex in triangle:
            lines.append(f"      vertex {vertex[0]:e} {vertex[1]:e} {vertex[2]:e}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines) + "\n"


def merge_stl(body_stl: str, head_stl: str, name: str = None) -> str:
    """
    Splice the head's facets into the body's STL document.

    Keeps the body's `solid` header, drops its trailing `endsolid` line, takes
    everything between the head's first `facet` and its `endsolid`, and closes
    with one `endsolid <name>`.
    """
    name = name or CONFIG.stl_name
    body_part = body_stl[:body_stl.rfind("endsolid")]
    head_part = head_stl[head_stl.find("facet"):head_stl.rfind("endsolid")]
    return body_part + head_part + f"endsolid {name}\n"


def count_facets(stl_text: str) -> int:
    """Number of facet blocks in an ASCII STL document."""
    return sum(1 for line in stl_text.splitlines() if line.strip().startswith("facet normal"))


def export_bird_stl(params: BirdParams) -> bytes:
    """Build a bird and return it as a single merged ASCII STL."""
    meshes = build_bird(params)
    body_stl = mesh_to_stl(meshes.body, CONFIG.stl_name)
    head_stl = mesh_to_stl(meshes.head, CONFIG.head_stl_name)
    merged = merge_stl(body_stl, head_stl, CONFIG.stl_name)
    logger.info(
        "Exported bird STL: %d body + %d head facets",
        len(meshes.body.faces), len(meshes.head.faces),
    )
    return merged.encode("ascii")
