# fe_worksheets/kernel/eigen.py
"""Generalized eigenvalue problems K·φ = λ·M·φ, exact (sympy) and numeric (scipy)."""

from typing import List, Optional, Tuple

import numpy as np
import sympy as sp
from scipy.linalg import eigh, null_space

from ..symbols import LAM


class EigenSolveError(RuntimeError):
    """Raised when a numeric generalized eigenvalue solve fails."""
    pass


def _check_pair(K, M) -> None:
    if K.shape != M.shape or K.shape[0] != K.shape[1]:
        raise ValueError(f"K and M must be square and the same shape, got {K.shape} and {M.shape}")


def characteristic_polynomial(K: sp.Matrix, M: sp.Matrix, lam=LAM):
    """det(K - lam·M), expanded."""
    _check_pair(K, M)
    return sp.expand((K - lam * M).det(method='berkowitz'))


def _sorted_roots(poly_expr, lam) -> List:
    poly_expr = sp.expand(poly_expr)
    if poly_expr.free_symbols <= {lam}:
        poly = sp.Poly(poly_expr, lam)
        if poly.domain.is_Exact:
            # Rational coefficients: exact real roots, ascending (radicals or CRootOf)
            return [r for r in poly.all_roots() if r.is_real]
        # Float coefficients (numeric material data): numeric roots
        roots = [r for r in poly.nroots() if abs(sp.im(r)) < 1e-9 * max(1, abs(r))]
        return sorted((sp.re(r) for r in roots), key=float)
    roots = sp.solve(poly_expr, lam)
    try:
        return sorted(roots, key=lambda r: float(sp.re(r.evalf())))
    except TypeError:
        # Free parameters left in the roots: keep sympy's order
        return roots


def symbolic_eigenvalues(K: sp.Matrix, M: sp.Matrix, lam=LAM) -> List:
    """
    Exact eigenvalues of K·φ = λ·M·φ as roots of det(K - λM).

    Returns:
        Roots in ascending order when they evaluate to numbers
    """
    return _sorted_roots(characteristic_polynomial(K, M, lam), lam)


def bordered_matrix(K: sp.Matrix, M: sp.Matrix, G: sp.Matrix, lam=LAM) -> sp.Matrix:
    """
    Saddle-point matrix of a Lagrange-multiplier functional:

        [[K - λM, Gᵀ],
         [G,      0 ]]
    """
    _check_pair(K, M)
    if G.shape[1] != K.shape[0]:
        raise ValueError(f"G has {G.shape[1]} columns, K has {K.shape[0]} rows")
    top = sp.Matrix.hstack(K - lam * M, G.T)
    bottom = sp.Matrix.hstack(G, sp.zeros(G.shape[0], G.shape[0]))
    return sp.Matrix.vstack(top, bottom)


def bordered_eigenvalues(K: sp.Matrix, M: sp.Matrix, G: sp.Matrix, lam=LAM) -> List:
    """Exact eigenvalues of the problem constrained by G·a = 0 (bordered determinant)."""
    det = sp.expand(bordered_matrix(K, M, G, lam).det(method='berkowitz'))
    return _sorted_roots(det, lam)


def generalized_eigenvalues(
    K: np.ndarray,
    M: np.ndarray,
    n_modes: Optional[int] = None,
    constraints: Optional[np.ndarray] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Numeric eigenvalues and eigenvectors of K·φ = λ·M·φ.

    Args:
        K: Stiffness matrix (n x n), symmetric
        M: Mass matrix (n x n), symmetric positive definite on the free space
        n_modes: Number of lowest modes to return (default: all)
        constraints: Optional G (m x n); the problem is solved on null(G)

    Returns:
        eigenvalues: ascending
        eigenvectors: (n x n_modes), in the original coordinates

    Raises:
        ValueError: If shapes are incompatible
        EigenSolveError: If scipy fails (e.g. M not positive definite)
    """
    K = np.asarray(K, dtype=float)
    M = np.asarray(M, dtype=float)
    _check_pair(K, M)

    # Restrict to the constraint null space: a = Z·c
    if constraints is not None:
        G = np.atleast_2d(np.asarray(constraints, dtype=float))
        if G.shape[1] != K.shape[0]:
            raise ValueError(f"constraints have {G.shape[1]} columns, K has {K.shape[0]} rows")
        Z = null_space(G)
    else:
        Z = np.eye(K.shape[0])

    if Z.shape[1] == 0:
        raise ValueError("Constraints leave no free coefficients")

    Kr = Z.T @ K @ Z
    Mr = Z.T @ M @ Z
    # Symmetrize round-off
    Kr = 0.5 * (Kr + Kr.T)
    Mr = 0.5 * (Mr + Mr.T)

    n_free = Kr.shape[0]
    n_actual = n_free if n_modes is None else min(n_modes, n_free)

    try:
        eigenvalues, eigenvectors = eigh(Kr, Mr, subset_by_index=[0, n_actual - 1])
    except np.linalg.LinAlgError as e:
        raise EigenSolveError(f"Eigenvalue solve failed: {e}") from e

    return eigenvalues, Z @ eigenvectors


def angular_frequencies(eigenvalues) -> np.ndarray:
    """ω = sqrt(λ); small negative round-off is clamped to 0."""
    lam = np.asarray(eigenvalues, dtype=float)
    return np.sqrt(np.maximum(lam, 0.0))
