import numpy as np
import pytest

from transform2d.visualization import draw_grid_image


@pytest.fixture
def grid_image():
    """Small BGR grid image (H=90, W=120)."""
    return draw_grid_image(120, 90, spacing=15)


@pytest.fixture
def noise_image():
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(37, 53, 3), dtype=np.uint8)


@pytest.fixture
def ramp_image():
    """Float32 image with value 2x + 3y, linear so bilinear sampling is exact."""
    ys, xs = np.mgrid[0:40, 0:50]
    return (2.0 * xs + 3.0 * ys).astype(np.float32)
