# fe_worksheets/kernel/numeric.py
"""
NUMERIC CHECKS: From Closed Form to Numbers
===========================================

PURPOSE:
--------
A derived matrix is only trusted after it passes the same checks a
numeric element would:

1. Symmetry: K = Kᵀ (reciprocity)
2. Rank: ndof minus the number of rigid-body modes (3 in 2D, 6 in 3D)
3. Rigid-body modes store no energy: K·r = 0

The helpers here substitute numbers for symbols, evaluate to numpy, and
run those checks. `tidy` keeps the symbolic entries readable (common
denominator, factored) before they are printed in a worksheet.
"""

from typing import Dict, Optional, Sequence

import numpy as np
import sympy as sp


def tidy(expr):
    """
    Bring a derived entry to a compact closed form.

    Entries with free symbols are put over a common denominator and
    factored; plain numbers are returned unchanged.
    """
    if isinstance(expr, sp.MatrixBase):
        return expr.applyfunc(tidy)
    expr = sp.sympify(expr)
    if not expr.free_symbols:
        return expr
    return sp.factor(sp.together(expr))


def substitute(matrix, values: Dict) -> sp.Matrix:
    """Substitute numbers (or expressions) for symbols in a Matrix."""
    return sp.Matrix(matrix).subs(values)


def to_numpy(matrix, values: Optional[Dict] = None) -> np.ndarray:
    """
    Evaluate a sympy Matrix to a float ndarray.

    Raises:
        ValueError: if symbols remain after substitution
    """
    m = sp.Matrix(matrix)
    if values:
        m = m.subs(values)
    leftover = m.free_symbols
    if leftover:
        names = sorted(str(s) for s in leftover)
        raise ValueError(f"Cannot evaluate numerically, free symbols remain: {names}")
    return np.array(m.evalf(), dtype=float)


def lambdify_matrix(matrix, symbols: Sequence):
    """Compile a Matrix into a numpy function of `symbols`."""
    return sp.lambdify(list(symbols), sp.Matrix(matrix), modules='numpy')


def is_symmetric(matrix, tol: float = 1e-10) -> bool:
    """Exact check for sympy matrices, tolerance check for arrays."""
    if isinstance(matrix, sp.MatrixBase):
        return (matrix - matrix.T).applyfunc(sp.simplify).is_zero_matrix
    a = np.asarray(matrix, dtype=float)
    return np.allclose(a, a.T, rtol=tol, atol=tol * max(1.0, np.abs(a).max()))


def numeric_rank(matrix, values: Optional[Dict] = None, rtol: float = 1e-9) -> int:
    """Rank of a (possibly symbolic) matrix after numeric substitution."""
    a = to_numpy(matrix, values) if isinstance(matrix, sp.MatrixBase) else np.asarray(matrix, dtype=float)
    s = np.linalg.svd(a, compute_uv=False)
    if s.size == 0 or s[0] == 0.0:
        return 0
    return int(np.sum(s > rtol * s[0]))


def rigid_body_modes(node_coords: Sequence[Sequence]) -> np.ndarray:
    """
    Rigid-body displacement vectors for an element with the given node coordinates.

    2D: translations in x and y, rotation about z (3 columns).
    3D: three translations, three rotations (6 columns).
    Rows follow node-interleaved ordering [u1, v1, (w1), u2, ...].
    """
    coords = np.asarray(node_coords, dtype=float)
    n_nodes, dim = coords.shape
    if dim == 2:
        modes = np.zeros((2 * n_nodes, 3))
        for i, (x, y) in enumerate(coords):
            modes[2 * i, 0] = 1.0
            modes[2 * i + 1, 1] = 1.0
            modes[2 * i, 2] = -y
            modes[2 * i + 1, 2] = x
        return modes
    if dim == 3:
        modes = np.zeros((3 * n_nodes, 6))
        for i, (x, y, z) in enumerate(coords):
            r = 3 * i
            modes[r:r + 3, 0:3] = np.eye(3)
            # Small rotations about x, y, z: u = θ × r
            modes[r + 1, 3], modes[r + 2, 3] = -z, y
            modes[r, 4], modes[r + 2, 4] = z, -x
            modes[r, 5], modes[r + 1, 5] = -y, x
        return modes
    raise ValueError(f"Node coordinates must be 2D or 3D, got dimension {dim}")
