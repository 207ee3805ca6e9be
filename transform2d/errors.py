"""Error kinds raised by the transform utilities."""


class TransformError(Exception):
    """Base class for transform errors."""


class InvalidParameter(TransformError, ValueError):
    """Degenerate construction input (e.g. zero scale) or bad warp arguments."""


class DegenerateTransform(TransformError, ArithmeticError):
    """Matrix is non-invertible or violates the affine bottom row."""
