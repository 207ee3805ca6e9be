"""Geometric transformation utilities."""
from .transform import (
    Point2D,
    Transform2D,
    apply,
    apply_points,
    compose,
    deg2rad,
    euclidean,
    from_matrix,
    identity,
    invert,
    rotation,
    scaling,
    similarity_about,
    translation,
)

__all__ = [
    "Point2D",
    "Transform2D",
    "apply",
    "apply_points",
    "compose",
    "deg2rad",
    "euclidean",
    "from_matrix",
    "identity",
    "invert",
    "rotation",
    "scaling",
    "similarity_about",
    "translation",
]
