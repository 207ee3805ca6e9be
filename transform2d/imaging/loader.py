"""Image file loading and saving."""
from pathlib import Path
from typing import Union
import cv2
import numpy as np
from rich import print


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Decode an image file into a BGR array.
    
    Args:
        path: Image file path
        
    Returns:
        (H, W, 3) uint8 image
        
    Raises:
        FileNotFoundError: if the file is missing or cannot be decoded
    """
    print(f"[bold]Loading image from:[/bold] {path}")
    img = cv2.imread(str(path))
    if img is None:
        raise FileNotFoundError(f"Could not find image file: {path}")
    return img


def save_image(path: Union[str, Path], image: np.ndarray) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(path), image):
        raise RuntimeError(f"Failed to write image: {path}")
    return path
