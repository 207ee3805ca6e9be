"""Visualization helpers."""
from .overlay import draw_grid_image, draw_points

__all__ = ["draw_grid_image", "draw_points"]
