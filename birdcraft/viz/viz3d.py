# birdcraft/viz/viz3d.py
"""
3D VISUALIZATION: Interactive Bird Viewer
=========================================

PURPOSE:
--------
Hand generated meshes to Plotly for an interactive preview:
- Rotation/zoom/pan of the bird
- Head and body as separate Mesh3d traces
- Export to HTML for sharing

Plotly does its own lighting from the vertex positions, so the meshes are
passed through as-is (no vertex deduplication).
"""

import logging
import os
from typing import Optional

import plotly.graph_objects as go
import trimesh

from ..geometry import BirdMeshes

logger = logging.getLogger(__name__)

BIRD_COLOR = 'rgb(212, 66, 43)'


def _mesh_trace(mesh: trimesh.Trimesh, name: str, color: str) -> go.Mesh3d:
    vertices = mesh.vertices
    faces = mesh.faces
    return go.Mesh3d(
        x=vertices[:, 0], y=vertices[:, 1], z=vertices[:, 2],
        i=faces[:, 0], j=faces[:, 1], k=faces[:, 2],
        color=color,
        flatshading=False,
        lighting=dict(ambient=0.4, diffuse=0.8, specular=0.2),
        name=name,
        hoverinfo='name',
        showlegend=True,
    )


def create_bird_figure(
    meshes: BirdMeshes,
    title: str = "Bird",
    color: str = BIRD_COLOR,
) -> go.Figure:
    """
    Create a Plotly figure with one Mesh3d trace per bird part.

    Parameters:
    -----------
    meshes : BirdMeshes
        Output of geometry.build_bird()
    title : str
        Plot title
    color : str
        Plotly color used for both parts

    Returns:
    --------
    go.Figure
    """
    fig = go.Figure()
    fig.add_trace(_mesh_trace(meshes.body, 'Body', color))
    fig.add_trace(_mesh_trace(meshes.head, 'Head', color))

    fig.update_layout(
        title=dict(text=title, font=dict(size=16)),
        scene=dict(
            xaxis=dict(title='X'),
            yaxis=dict(title='Y'),
            zaxis=dict(title='Z'),
            aspectmode='data',
            camera=dict(
                eye=dict(x=-1.2, y=-1.6, z=0.8),
            ),
        ),
        legend=dict(x=0.02, y=0.98),
        margin=dict(l=0, r=0, t=40, b=0),
    )
    return fig


def plot_bird_3d(
    meshes: BirdMeshes,
    title: str = "Bird",
    outpath: Optional[str] = None,
    show: bool = True,
    **kwargs
) -> go.Figure:
    """
    Create and optionally display/save a bird preview.

    outpath : Optional[str]
        If provided, save as HTML file
    show : bool
        Whether to display the figure (default: True)
    """
    fig = create_bird_figure(meshes, title=title, **kwargs)

    if outpath:
        os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
        fig.write_html(outpath)
        logger.info("3D visualization saved to: %s", outpath)

    if show:
        fig.show()

    return fig
