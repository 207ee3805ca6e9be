"""2D homogeneous transforms and inverse-warp image resampling."""
from .errors import DegenerateTransform, InvalidParameter, TransformError
from .geometry import (
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
from .processing import warp_image

__version__ = "0.1.0"

__all__ = [
    "DegenerateTransform",
    "InvalidParameter",
    "TransformError",
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
    "warp_image",
]
