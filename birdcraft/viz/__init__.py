# birdcraft/viz - Visualization Tools
"""
VIZ: Interactive bird previews (Plotly).
"""

from .viz3d import plot_bird_3d, create_bird_figure

__all__ = ['plot_bird_3d', 'create_bird_figure']
