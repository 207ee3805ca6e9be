"""Marshalling between Transform2D and OpenCV."""
from typing import Optional, Tuple
import cv2
import numpy as np

from ..errors import InvalidParameter
from ..geometry.transform import Transform2D, checked_matrix, invert
from ..processing.warp import resolve_output_size
from ..utils.mappings import interpolation_to_cv


def to_cv_matrix(transform: Transform2D) -> np.ndarray:
    """Return the transform as a C-contiguous float64 3x3 array for cv2."""
    return np.ascontiguousarray(transform.matrix, dtype=np.float64)


def from_cv_matrix(matrix: np.ndarray) -> Transform2D:
    """Build a Transform2D from a 2x3 affine or 3x3 OpenCV matrix.
    
    Args:
        matrix: Output of e.g. cv2.getRotationMatrix2D or cv2.getAffineTransform
        
    Returns:
        Transform2D with the affine bottom row completed when needed
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape == (2, 3):
        m = np.vstack([m, [0.0, 0.0, 1.0]])
    if m.shape != (3, 3):
        raise InvalidParameter(f"Expected a 2x3 or 3x3 matrix, got shape {m.shape}")
    return Transform2D(m)


def _cv_border(border_value) -> Tuple[float, float, float, float]:
    b = np.atleast_1d(np.asarray(border_value, dtype=np.float64))
    if b.size == 1:
        return (float(b[0]),) * 4
    padded = list(b[:4]) + [0.0] * (4 - min(b.size, 4))
    return tuple(float(v) for v in padded)


def warp_image_cv(
    transform: Transform2D,
    source: np.ndarray,
    output_size: Optional[Tuple[int, int]] = None,
    interpolation: str = "cubic",
    border_value=0,
) -> np.ndarray:
    """Warp an image with cv2.warpPerspective under the warp_image contract.
    
    Args:
        transform: Forward transform, source pixel -> destination pixel
        source: Image to warp
        output_size: (width, height), defaults to the source size
        interpolation: Interpolation name or alias
        border_value: Constant fill outside the source
        
    Returns:
        Warped image
    """
    flag = interpolation_to_cv(interpolation)
    if flag is None:
        raise InvalidParameter(f"Unknown interpolation: {interpolation!r}")
    checked_matrix(transform)
    # raises DegenerateTransform for a singular matrix, as warp_image does
    invert(transform)
    dsize = resolve_output_size(source, output_size)
    return cv2.warpPerspective(
        source,
        to_cv_matrix(transform),
        dsize,
        flags=flag,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=_cv_border(border_value),
    )
