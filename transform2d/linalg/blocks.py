"""Explicit block accessors for dense matrices.

Reads return independent copies and writes go through `update_block`, which
returns a new matrix, so no caller ever holds a view aliasing another
matrix's storage.
"""
from typing import Callable, Tuple, Union
import numpy as np

Index = Union[int, slice]


def get_block(matrix: np.ndarray, rows: Index, cols: Index) -> np.ndarray:
    """Copy of matrix[rows, cols]."""
    return np.array(np.asarray(matrix)[rows, cols], copy=True)


def row(matrix: np.ndarray, i: int) -> np.ndarray:
    return get_block(matrix, i, slice(None))


def col(matrix: np.ndarray, j: int) -> np.ndarray:
    return get_block(matrix, slice(None), j)


def top_left_corner(matrix: np.ndarray, n_rows: int, n_cols: int) -> np.ndarray:
    return get_block(matrix, slice(0, n_rows), slice(0, n_cols))


def update_block(
    matrix: np.ndarray,
    rows: Index,
    cols: Index,
    fn: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    """Return a copy of `matrix` with block [rows, cols] replaced by fn(block).
    
    Args:
        matrix: Input matrix, left untouched
        rows: Row index or slice
        cols: Column index or slice
        fn: Receives a copy of the block, returns its new value
        
    Returns:
        New matrix with the updated block
    """
    out = np.array(matrix, copy=True)
    out[rows, cols] = fn(out[rows, cols].copy())
    return out


def set_coefficient(matrix: np.ndarray, index: Union[int, Tuple[int, int]], value: float) -> np.ndarray:
    """Copy of `matrix` with the coefficient at `index` set to `value`."""
    out = np.array(matrix, copy=True)
    out[index] = value
    return out


def set_zero(matrix: np.ndarray, rows: Index, cols: Index) -> np.ndarray:
    return update_block(matrix, rows, cols, np.zeros_like)
