# fe_worksheets/ritz/exact.py
"""Closed-form cantilever vibration: frequency equation 1 + cos βL · cosh βL = 0."""

import numpy as np
import sympy as sp
from scipy.optimize import brentq

from ..model import BeamProperties

BETA_L = sp.Symbol('beta_L', positive=True)


def frequency_equation(beta_L=BETA_L) -> sp.Expr:
    """Transcendental eigenvalue equation of the clamped-free beam (left side, = 0)."""
    return 1 + sp.cos(beta_L) * sp.cosh(beta_L)


def _scaled_equation(b: float) -> float:
    # Same roots as 1 + cos·cosh, divided by cosh to stay bounded
    return np.cos(b) + 1.0 / np.cosh(b)


def cantilever_roots(n: int) -> np.ndarray:
    """
    First n roots β_k L of the frequency equation.

    The k-th root is bracketed by [(k-1)π, kπ]; the scaled equation changes
    sign across every such interval.
    """
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    roots = []
    for k in range(1, n + 1):
        lo, hi = (k - 1) * np.pi, k * np.pi
        roots.append(brentq(_scaled_equation, lo, hi, xtol=1e-14))
    return np.array(roots)


def exact_eigenvalues(n: int) -> np.ndarray:
    """Nondimensional eigenvalues ω² ρA L⁴ / EI = (β_k L)⁴."""
    return cantilever_roots(n) ** 4


def exact_frequencies(n: int, beam: BeamProperties) -> np.ndarray:
    """Angular frequencies ω_k = (β_k L)² sqrt(EI / (ρA L⁴)) in rad/s."""
    EI, rhoA, L = (float(v) for v in (beam.EI, beam.rhoA, beam.L))
    return cantilever_roots(n) ** 2 * np.sqrt(EI / (rhoA * L**4))


def exact_mode_shape(k: int, xi) -> np.ndarray:
    """
    k-th mode shape on ξ = x/L ∈ [0, 1], scaled so the tip deflection is 1.

        φ(ξ) = cosh βξ - cos βξ - σ (sinh βξ - sin βξ)
        σ = (cosh β + cos β) / (sinh β + sin β)
    """
    beta = cantilever_roots(k)[-1]
    xi = np.asarray(xi, dtype=float)
    sigma = (np.cosh(beta) + np.cos(beta)) / (np.sinh(beta) + np.sin(beta))

    def phi(s):
        return np.cosh(beta * s) - np.cos(beta * s) - sigma * (np.sinh(beta * s) - np.sin(beta * s))

    return phi(xi) / phi(1.0)
