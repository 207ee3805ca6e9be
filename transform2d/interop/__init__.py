"""Interop with external image libraries."""
from .opencv import from_cv_matrix, to_cv_matrix, warp_image_cv

__all__ = ["to_cv_matrix", "from_cv_matrix", "warp_image_cv"]
