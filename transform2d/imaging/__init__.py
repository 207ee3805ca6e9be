"""Image file I/O."""
from .loader import load_image, save_image

__all__ = ["load_image", "save_image"]
