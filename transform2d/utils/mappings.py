"""Interpolation name mapping utilities."""
from typing import Optional
import cv2


def canonical_interpolation(name: str) -> Optional[str]:
    """Map an interpolation name or alias to its canonical form.
    
    Args:
        name: Interpolation name such as 'nearest', 'bilinear' or 'bicubic'
        
    Returns:
        'nearest', 'linear' or 'cubic', or None if unknown
    """
    mapping = {
        "nearest": "nearest",
        "linear": "linear",
        "bilinear": "linear",
        "cubic": "cubic",
        "bicubic": "cubic",
    }
    return mapping.get(name.lower())


def interpolation_to_cv(name: str) -> Optional[int]:
    """Map an interpolation name to the matching OpenCV flag.
    
    Args:
        name: Interpolation name or alias
        
    Returns:
        cv2.INTER_* constant or None if unknown
    """
    mapping = {
        "nearest": cv2.INTER_NEAREST,
        "linear": cv2.INTER_LINEAR,
        "cubic": cv2.INTER_CUBIC,
    }
    canonical = canonical_interpolation(name)
    return mapping.get(canonical) if canonical else None
