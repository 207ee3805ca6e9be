"""2D homogeneous transforms: construction, composition and point mapping."""
import math
from typing import NamedTuple, Sequence, Tuple, Union
import numpy as np

from ..config import AFFINE_TOLERANCE, DETERMINANT_EPSILON
from ..errors import DegenerateTransform, InvalidParameter

_AFFINE_ROW = np.array([0.0, 0.0, 1.0])


class Point2D(NamedTuple):
    """Euclidean point in pixel coordinates (x right, y down)."""

    x: float
    y: float


PointLike = Union[Point2D, Tuple[float, float], Sequence[float]]


class Transform2D:
    """Affine map of the plane stored as a 3x3 homogeneous matrix.

    Instances are immutable values. The backing array is a private read-only
    copy, accessors hand out copies, and every operation that changes
    coefficients returns a new transform.
    """

    __slots__ = ("_m",)

    def __init__(self, matrix) -> None:
        if isinstance(matrix, Transform2D):
            matrix = matrix._m
        m = np.array(matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise InvalidParameter(f"Expected a 3x3 matrix, got shape {m.shape}")
        if not np.all(np.isfinite(m)):
            raise InvalidParameter("Matrix has non-finite coefficients")
        m.setflags(write=False)
        self._m = m

    @property
    def matrix(self) -> np.ndarray:
        """Copy of the full 3x3 matrix."""
        return self._m.copy()

    @property
    def linear(self) -> np.ndarray:
        """Copy of the top-left 2x2 rotation/scale block."""
        return self._m[:2, :2].copy()

    @property
    def translation_part(self) -> np.ndarray:
        """Copy of the translation column (dx, dy)."""
        return self._m[:2, 2].copy()

    def block(self, rows: slice, cols: slice) -> np.ndarray:
        """Read a sub-block of the matrix as an independent copy."""
        return np.array(self._m[rows, cols], copy=True)

    def with_coefficient(self, row: int, col: int, value: float) -> "Transform2D":
        """Return a new transform with one coefficient replaced.

        The result is not checked against the affine invariant here;
        `apply` and `warp_image` validate it on use.
        """
        m = self._m.copy()
        m[row, col] = value
        return Transform2D(m)

    def determinant(self) -> float:
        return float(np.linalg.det(self._m))

    def is_affine(self, tol: float = AFFINE_TOLERANCE) -> bool:
        """Check that the bottom row is [0, 0, 1] within `tol`."""
        return bool(np.allclose(self._m[2], _AFFINE_ROW, rtol=0.0, atol=tol))

    def allclose(self, other: "Transform2D", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._m, other._m, rtol=0.0, atol=atol))

    def inverse(self) -> "Transform2D":
        return invert(self)

    def apply(self, point: PointLike) -> Point2D:
        return apply(self, point)

    def __matmul__(self, other):
        if not isinstance(other, Transform2D):
            return NotImplemented
        return compose(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Transform2D):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        # +0.0 folds -0.0 into 0.0 so equal matrices hash alike
        return hash((self._m + 0.0).tobytes())

    def __repr__(self) -> str:
        body = np.array2string(self._m, precision=6, separator=", ", suppress_small=True)
        return f"Transform2D({body})"


def deg2rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidParameter(f"{name} must be finite, got {value!r}")


def identity() -> Transform2D:
    return Transform2D(np.eye(3))


def rotation(angle: float) -> Transform2D:
    """Rotation about the origin by `angle` radians.

    Args:
        angle: Rotation angle in radians (positive turns +x towards +y)

    Returns:
        Transform2D with an orthonormal 2x2 block and zero translation
    """
    _require_finite(angle=angle)
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(3)
    m[:2, :2] = [[c, -s], [s, c]]
    return Transform2D(m)


def translation(dx: float, dy: float) -> Transform2D:
    """Pure translation by (dx, dy)."""
    _require_finite(dx=dx, dy=dy)
    m = np.eye(3)
    m[:2, 2] = (dx, dy)
    return Transform2D(m)


def scaling(factor: float) -> Transform2D:
    """Uniform scaling about the origin.

    Args:
        factor: Scale factor, must be finite and non-zero

    Returns:
        Transform2D with factor * I as its 2x2 block

    Raises:
        InvalidParameter: if factor is zero or non-finite
    """
    _require_finite(factor=factor)
    if factor == 0.0:
        raise InvalidParameter("Scale factor must be non-zero")
    m = np.eye(3)
    m[:2, :2] *= factor
    return Transform2D(m)


def euclidean(angle: float, dx: float, dy: float) -> Transform2D:
    """Rotate by `angle` radians, then translate by (dx, dy)."""
    return compose(translation(dx, dy), rotation(angle))


def from_matrix(matrix) -> Transform2D:
    """Wrap an arbitrary 3x3 real matrix without checking the affine row."""
    return Transform2D(matrix)


def compose(first: Transform2D, *rest: Transform2D) -> Transform2D:
    """Matrix product of the operands, left to right.

    `compose(A, B)` is A @ B: apply B first, then A. Further operands fold
    in the same order, so `compose(A, B, C)` applies C, then B, then A.

    Args:
        first: Leftmost (last applied) transform
        rest: Remaining transforms

    Returns:
        New Transform2D, the operands are left untouched
    """
    for t in (first,) + rest:
        if not isinstance(t, Transform2D):
            raise TypeError(f"compose expects Transform2D operands, got {type(t).__name__}")
    m = first._m
    for t in rest:
        m = m @ t._m
    return Transform2D(m)


def similarity_about(center: PointLike, angle: float, scale: float) -> Transform2D:
    """Rotate by `angle` radians and scale by `scale` around `center`.

    Built as translate_back @ scaling @ rotation @ translate_to_origin, so
    `center` is a fixed point of the result.
    """
    cx, cy = float(center[0]), float(center[1])
    return compose(
        translation(cx, cy),
        scaling(scale),
        rotation(angle),
        translation(-cx, -cy),
    )


def checked_matrix(transform: Transform2D) -> np.ndarray:
    """Return the read-only matrix of an affine transform.

    Raises:
        DegenerateTransform: if the bottom row is not [0, 0, 1]
    """
    if not transform.is_affine():
        raise DegenerateTransform(
            f"Bottom row {transform._m[2].tolist()} violates the affine invariant [0, 0, 1]"
        )
    return transform._m


def apply(transform: Transform2D, point: PointLike) -> Point2D:
    """Map a point through the transform with homogeneous normalization.

    Args:
        transform: Affine transform
        point: (x, y) pair

    Returns:
        Transformed Point2D

    Raises:
        DegenerateTransform: if the affine row is violated or w == 0
    """
    m = checked_matrix(transform)
    x, y = float(point[0]), float(point[1])
    h = m @ np.array([x, y, 1.0])
    if h[2] == 0.0:
        raise DegenerateTransform("Homogeneous component is zero after transform")
    return Point2D(float(h[0] / h[2]), float(h[1] / h[2]))


def apply_points(transform: Transform2D, pts) -> np.ndarray:
    """Map an (N, 2) array of points through the transform."""
    m = checked_matrix(transform)
    pts = np.asarray(pts, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise InvalidParameter(f"Expected an (N, 2) array of points, got shape {pts.shape}")
    if pts.shape[0] == 0:
        return pts.copy()
    ones = np.ones((pts.shape[0], 1), dtype=np.float64)
    pts_h = np.concatenate([pts, ones], axis=1)
    proj = (m @ pts_h.T).T
    if np.any(proj[:, 2] == 0.0):
        raise DegenerateTransform("Homogeneous component is zero after transform")
    return proj[:, :2] / proj[:, 2:3]


def invert(transform: Transform2D) -> Transform2D:
    """Inverse transform.

    Raises:
        DegenerateTransform: if |det| is below DETERMINANT_EPSILON
    """
    det = transform.determinant()
    if abs(det) < DETERMINANT_EPSILON:
        raise DegenerateTransform(f"Transform is not invertible (det={det:.3e})")
    return Transform2D(np.linalg.inv(transform._m))
