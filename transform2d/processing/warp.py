"""Inverse-warp image resampling."""
from typing import Optional, Tuple, Union
import numpy as np
from joblib import Parallel, delayed

from ..config import ROW_BAND_HEIGHT
from ..errors import InvalidParameter
from ..geometry.transform import Transform2D, checked_matrix, invert
from ..utils.mappings import canonical_interpolation
from ..utils.workers import resolve_workers
from .sampling import get_sampler, prepare_border, saturate_cast


def resolve_output_size(source: np.ndarray, output_size: Optional[Tuple[int, int]]) -> Tuple[int, int]:
    if output_size is None:
        return source.shape[1], source.shape[0]
    out_w, out_h = (int(v) for v in output_size)
    if out_w <= 0 or out_h <= 0:
        raise InvalidParameter(f"Output size must be positive, got {output_size}")
    return out_w, out_h


def _warp_rows(
    inv: np.ndarray,
    source: np.ndarray,
    start: int,
    stop: int,
    out_w: int,
    sampler,
    border: np.ndarray,
) -> np.ndarray:
    """Sample destination rows [start, stop) through the inverse matrix."""
    xs = np.arange(out_w, dtype=np.float64)
    ys = np.arange(start, stop, dtype=np.float64)
    X, Y = np.meshgrid(xs, ys)
    sx = inv[0, 0] * X + inv[0, 1] * Y + inv[0, 2]
    sy = inv[1, 0] * X + inv[1, 1] * Y + inv[1, 2]
    w = inv[2, 0] * X + inv[2, 1] * Y + inv[2, 2]
    return sampler(source, sx / w, sy / w, border)


def warp_image(
    transform: Transform2D,
    source: np.ndarray,
    output_size: Optional[Tuple[int, int]] = None,
    interpolation: str = "bilinear",
    border_value=0,
    workers: Union[str, int] = 1,
) -> np.ndarray:
    """Warp an image by a transform using inverse mapping.

    Every destination pixel (x, y) is pulled from source coordinate
    T^-1 (x, y, 1), so each output pixel is written exactly once. The
    inverse is computed once per call; destination rows are split into
    bands that are sampled in parallel when `workers` is not 1.

    Args:
        transform: Forward transform, source pixel -> destination pixel
        source: (H, W) or (H, W, C) image of any real dtype
        output_size: (width, height) of the result, defaults to the source size
        interpolation: 'nearest', 'bilinear'/'linear' or 'bicubic'/'cubic'
        border_value: Fill for pixels that map outside the source
        workers: Thread count or 'auto'

    Returns:
        Warped image with the source dtype

    Raises:
        DegenerateTransform: if the transform is singular or not affine
        InvalidParameter: on bad image shape, size or interpolation name
    """
    source = np.asarray(source)
    if source.ndim not in (2, 3) or source.shape[0] == 0 or source.shape[1] == 0:
        raise InvalidParameter(f"Expected a non-empty (H, W) or (H, W, C) image, got shape {source.shape}")
    method = canonical_interpolation(interpolation)
    if method is None:
        raise InvalidParameter(f"Unknown interpolation: {interpolation!r}")
    sampler = get_sampler(method)
    out_w, out_h = resolve_output_size(source, output_size)
    border = prepare_border(border_value, source)

    checked_matrix(transform)
    inv = invert(transform).matrix

    out = np.empty((out_h, out_w) + source.shape[2:], dtype=source.dtype)
    bands = [(start, min(start + ROW_BAND_HEIGHT, out_h)) for start in range(0, out_h, ROW_BAND_HEIGHT)]

    def _fill(start: int, stop: int) -> None:
        values = _warp_rows(inv, source, start, stop, out_w, sampler, border)
        out[start:stop] = saturate_cast(values, out.dtype)

    n_jobs = resolve_workers(workers)
    if n_jobs == 1 or len(bands) == 1:
        for start, stop in bands:
            _fill(start, stop)
    else:
        # bands write disjoint rows of `out`; source and inv are read-only
        Parallel(n_jobs=n_jobs, prefer="threads")(delayed(_fill)(start, stop) for start, stop in bands)
    return out
