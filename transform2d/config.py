"""Default parameters and numeric tolerances."""
from pathlib import Path

# Euclidean transformation of the demo (rotate, then translate)
ANGLE_DEG = 30.0
TRANSLATION = (100.0, 200.0)

# Similarity about the image centre
SCALE = 0.75

# Pixel pushed through E
PIXEL = (100.0, 100.0)

DEFAULT_IMAGE = Path("img_grid.png")
DEFAULT_INTERPOLATION = "cubic"

WINDOW_ORIGINAL = "Lab 1.2: Original image"
WINDOW_TRANSFORMED = "Lab 1.2: Transformed image"
WINDOW_COMPOSED = "Lab 1.2: Composed transformation"

# |det| below this is treated as singular
DETERMINANT_EPSILON = 1e-12
# Allowed deviation of the bottom row from [0, 0, 1]
AFFINE_TOLERANCE = 1e-9

# Destination rows per parallel work item
ROW_BAND_HEIGHT = 64
