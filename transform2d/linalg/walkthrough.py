"""Dense linear algebra walkthrough: construction, coefficients, blocks,
arithmetic and reductions on small vectors and matrices.

Each step takes the named values of the previous one and returns a new
dict, leaving its input untouched.
"""
from typing import Dict, List, Tuple
import numpy as np

from .blocks import col, row, set_coefficient, set_zero, top_left_corner

Values = Dict[str, object]


def create_matrices() -> Values:
    """a) Create a few vectors and matrices."""
    t = np.array([1.0, 0.0, 3.0])
    A = np.array([
        [1.0, 0.0, 3.0],
        [4.0, 5.0, 6.0],
        [7.0, 8.0, 9.0],
    ])
    I = np.eye(3)
    T = np.block([
        [A, t[:, None]],
        [np.zeros((1, 3)), np.ones((1, 1))],
    ])
    B = A.T.copy()
    return {"t": t, "A": A, "I": I, "T": T, "B": B}


def edit_coefficients(values: Values) -> Values:
    """b) Set single coefficients in t, A and the matching ones in T."""
    out = dict(values)
    out["t"] = set_coefficient(values["t"], 1, 2.0)
    out["A"] = set_coefficient(values["A"], (0, 1), 2.0)
    T = set_coefficient(values["T"], (0, 1), 2.0)
    out["T"] = set_coefficient(T, (1, 3), 2.0)
    return out


def extract_blocks(values: Values) -> Values:
    """c) Extract r_2, c_2 and T_3x4 as copies, then zero the same blocks."""
    A, T = values["A"], values["T"]
    out = dict(values)
    out["r_2"] = row(A, 1)
    out["c_2"] = col(A, 1)
    out["T_3x4"] = top_left_corner(T, 3, 4)

    A = set_zero(A, 1, slice(None))
    A = set_zero(A, slice(None), 1)
    out["A"] = A
    out["T"] = set_zero(T, slice(0, 3), slice(0, 4))
    return out


def arithmetic(values: Values) -> Values:
    """d) Matrix and vector arithmetic."""
    t, c_2 = values["t"], values["c_2"]
    A, I, B, T_3x4 = values["A"], values["I"], values["B"], values["T_3x4"]
    return {
        "t + c_2": t + c_2,
        "A + I": A + I,
        "(A+I) * T_3x4": (A + I) @ T_3x4,
        "t.transpose() * c_2": t[None, :] @ c_2[:, None],
        "t.dot(c_2)": float(np.dot(t, c_2)),
        "Element-wise B * I": B * I,
    }


def reductions(values: Values) -> Values:
    """e) Reductions."""
    I, B, t = values["I"], values["B"], values["t"]
    min_row, min_col = np.unravel_index(np.argmin(B), B.shape)
    return {
        "Sum of elements in I": float(I.sum()),
        "Min in B": float(B.min()),
        "Min in B at": (int(min_row), int(min_col)),
        "Max of each column in B": B.max(axis=0),
        "L2-norm of t": float(np.linalg.norm(t)),
        "Number of elements greater than 3 in B": int(np.count_nonzero(B > 3.0)),
    }


def run_walkthrough() -> List[Tuple[str, Values]]:
    """Run all steps in order.
    
    Returns:
        List of (section title, named results) pairs
    """
    created = create_matrices()
    edited = edit_coefficients(created)
    blocks = extract_blocks(edited)
    zeroed = {"A": blocks["A"], "T": blocks["T"]}
    return [
        ("a) Create a few vectors and matrices", created),
        ("b) Coefficients", {k: edited[k] for k in ("t", "A", "T")}),
        ("c) Block operations", {k: blocks[k] for k in ("r_2", "c_2", "T_3x4")}),
        ("After setting blocks to 0", zeroed),
        ("d) Matrix and vector arithmetic", arithmetic(blocks)),
        ("e) Reductions", reductions(blocks)),
    ]
