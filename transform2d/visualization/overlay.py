"""Drawing helpers for the transform demos."""
from typing import Iterable, Tuple
import cv2
import numpy as np


def draw_grid_image(w: int = 640, h: int = 480, spacing: int = 40) -> np.ndarray:
    """Draw a synthetic grid image for warping demos.
    
    White background, grey grid lines every `spacing` pixels, a thicker
    border and a red cross through the image centre so rotation and
    scaling about the centre are easy to see.
    
    Args:
        w: Image width
        h: Image height
        spacing: Grid spacing in pixels
        
    Returns:
        (h, w, 3) uint8 BGR image
    """
    img = np.full((h, w, 3), 255, dtype=np.uint8)

    for x in range(0, w, spacing):
        thickness = 2 if (x // spacing) % 5 == 0 else 1
        cv2.line(img, (x, 0), (x, h - 1), (160, 160, 160), thickness)
    for y in range(0, h, spacing):
        thickness = 2 if (y // spacing) % 5 == 0 else 1
        cv2.line(img, (0, y), (w - 1, y), (160, 160, 160), thickness)

    cv2.rectangle(img, (0, 0), (w - 1, h - 1), (0, 0, 0), 3)

    cx, cy = w // 2, h // 2
    cv2.line(img, (cx, 0), (cx, h - 1), (0, 0, 255), 2)
    cv2.line(img, (0, cy), (w - 1, cy), (0, 0, 255), 2)
    cv2.putText(img, "(0,0)", (6, 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 0, 0), 1)
    return img


def draw_points(
    image: np.ndarray,
    points: Iterable[Tuple[float, float]],
    color: Tuple[int, int, int] = (0, 200, 0),
    radius: int = 5,
) -> np.ndarray:
    """Mark points on a copy of the image."""
    out = image.copy()
    for x, y in points:
        cv2.circle(out, (int(round(x)), int(round(y))), radius, color, -1)
    return out
