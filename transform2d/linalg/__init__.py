"""Dense matrix helpers and the linear algebra walkthrough."""
from .blocks import col, get_block, row, set_coefficient, set_zero, top_left_corner, update_block
from .walkthrough import run_walkthrough

__all__ = [
    "col",
    "get_block",
    "row",
    "set_coefficient",
    "set_zero",
    "top_left_corner",
    "update_block",
    "run_walkthrough",
]
