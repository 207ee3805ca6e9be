"""Raster sampling at non-integer coordinates with a constant border."""
from typing import Callable, Dict
import numpy as np

from ..errors import InvalidParameter

# Keys cubic convolution coefficient, same as OpenCV's INTER_CUBIC
CUBIC_A = -0.75

# Out-of-range coordinates are clamped this far outside the image so the
# integer cast stays safe; every neighbour of a clamped coordinate is border.
_CLAMP_MARGIN = 3


def prepare_border(border_value, source: np.ndarray) -> np.ndarray:
    """Normalize a border value to a scalar or per-channel float array.

    Args:
        border_value: Scalar or sequence (extra trailing entries are ignored,
            as with an OpenCV Scalar)
        source: Image the border belongs to

    Returns:
        0-d array for single-channel images, (C,) array otherwise
    """
    b = np.asarray(border_value, dtype=np.float64)
    if b.ndim > 1:
        raise InvalidParameter(f"Border value must be a scalar or 1D sequence, got shape {b.shape}")
    if source.ndim == 2:
        if b.size != 1:
            raise InvalidParameter("Single-channel images need a scalar border value")
        return b.reshape(())
    channels = source.shape[2]
    if b.ndim == 0:
        return np.full(channels, float(b))
    if b.size < channels:
        raise InvalidParameter(f"Border value has {b.size} entries, image has {channels} channels")
    return b[:channels].copy()


def saturate_cast(values: np.ndarray, dtype) -> np.ndarray:
    """Round and clip float samples into `dtype` (integers) or cast (floats)."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(values), info.min, info.max).astype(dtype)
    return values.astype(dtype)


def _gather(source: np.ndarray, ix: np.ndarray, iy: np.ndarray, border: np.ndarray) -> np.ndarray:
    """Fetch source[iy, ix] as float64, substituting `border` outside the image."""
    h, w = source.shape[:2]
    inside = (ix >= 0) & (ix < w) & (iy >= 0) & (iy < h)
    vals = source[np.clip(iy, 0, h - 1), np.clip(ix, 0, w - 1)].astype(np.float64)
    vals[~inside] = border
    return vals


def _clamp(source: np.ndarray, x: np.ndarray, y: np.ndarray):
    h, w = source.shape[:2]
    x = np.clip(x, -_CLAMP_MARGIN, w - 1 + _CLAMP_MARGIN)
    y = np.clip(y, -_CLAMP_MARGIN, h - 1 + _CLAMP_MARGIN)
    return x, y


def _expand(weights: np.ndarray, source: np.ndarray) -> np.ndarray:
    """Add a channel axis to per-pixel weights for multi-channel images."""
    return weights[..., None] if source.ndim == 3 else weights


def sample_nearest(source: np.ndarray, x: np.ndarray, y: np.ndarray, border: np.ndarray) -> np.ndarray:
    x, y = _clamp(source, x, y)
    ix = np.rint(x).astype(np.intp)
    iy = np.rint(y).astype(np.intp)
    return _gather(source, ix, iy, border)


def sample_linear(source: np.ndarray, x: np.ndarray, y: np.ndarray, border: np.ndarray) -> np.ndarray:
    """Bilinear interpolation from the 2x2 neighbourhood of each coordinate."""
    x, y = _clamp(source, x, y)
    x0 = np.floor(x)
    y0 = np.floor(y)
    fx = _expand(x - x0, source)
    fy = _expand(y - y0, source)
    ix = x0.astype(np.intp)
    iy = y0.astype(np.intp)

    top = (1.0 - fx) * _gather(source, ix, iy, border) + fx * _gather(source, ix + 1, iy, border)
    bot = (1.0 - fx) * _gather(source, ix, iy + 1, border) + fx * _gather(source, ix + 1, iy + 1, border)
    return (1.0 - fy) * top + fy * bot


def _cubic_weights(t: np.ndarray):
    a = CUBIC_A
    w0 = ((a * (t + 1.0) - 5.0 * a) * (t + 1.0) + 8.0 * a) * (t + 1.0) - 4.0 * a
    w1 = ((a + 2.0) * t - (a + 3.0)) * t * t + 1.0
    w2 = ((a + 2.0) * (1.0 - t) - (a + 3.0)) * (1.0 - t) * (1.0 - t) + 1.0
    w3 = 1.0 - w0 - w1 - w2
    return w0, w1, w2, w3


def sample_cubic(source: np.ndarray, x: np.ndarray, y: np.ndarray, border: np.ndarray) -> np.ndarray:
    """Bicubic interpolation from the 4x4 neighbourhood of each coordinate."""
    x, y = _clamp(source, x, y)
    x0 = np.floor(x)
    y0 = np.floor(y)
    wx = [_expand(w, source) for w in _cubic_weights(x - x0)]
    wy = [_expand(w, source) for w in _cubic_weights(y - y0)]
    ix = x0.astype(np.intp)
    iy = y0.astype(np.intp)

    out = 0.0
    for j in range(4):
        row = 0.0
        for i in range(4):
            row = row + wx[i] * _gather(source, ix + (i - 1), iy + (j - 1), border)
        out = out + wy[j] * row
    return out


_SAMPLERS: Dict[str, Callable] = {
    "nearest": sample_nearest,
    "linear": sample_linear,
    "cubic": sample_cubic,
}


def get_sampler(method: str) -> Callable:
    """Look up the sampler for a canonical interpolation name."""
    try:
        return _SAMPLERS[method]
    except KeyError:
        raise InvalidParameter(f"Unknown interpolation: {method!r}") from None
