"""Image resampling."""
from .sampling import sample_cubic, sample_linear, sample_nearest
from .warp import warp_image

__all__ = ["warp_image", "sample_nearest", "sample_linear", "sample_cubic"]
