# fe_worksheets/ritz/trial.py
"""
TRIAL EXPANSIONS
================

A Ritz solution is a finite sum w(x) = Σ a_k φ_k(x) with unknown
coefficients a_k. The coefficients are sympy symbols, so the energies
built from w stay exact quadratic forms in them.

The polynomial basis (x/L)^k keeps every coefficient dimensionless:

    start=2:  (x/L)², (x/L)³, ...     already clamped at x = 0
    start=0:  1, x/L, (x/L)², ...      complete; clamping imposed separately
"""

from dataclasses import dataclass
from typing import Tuple

import sympy as sp

from ..symbols import X, L


@dataclass(frozen=True)
class TrialExpansion:
    """
    Finite-dimensional trial function.

    coefficients: unknown symbols (a_0, a_1, ...)
    basis: basis functions φ_k(x), same length as coefficients
    variable: the coordinate x
    """
    coefficients: Tuple[sp.Symbol, ...]
    basis: Tuple[sp.Expr, ...]
    variable: sp.Symbol = X

    @property
    def expression(self) -> sp.Expr:
        return sum(c * phi for c, phi in zip(self.coefficients, self.basis))

    @property
    def n_terms(self) -> int:
        return len(self.coefficients)

    def derivative(self, order: int = 1) -> sp.Expr:
        return sp.diff(self.expression, self.variable, order)

    def evaluate(self, values) -> sp.Expr:
        """Expression with numbers substituted for the coefficients."""
        values = list(values)
        if len(values) != self.n_terms:
            raise ValueError(f"Expected {self.n_terms} coefficient values, got {len(values)}")
        return self.expression.subs(dict(zip(self.coefficients, values)))


def polynomial_trial(n_terms: int, x=X, length=L, start: int = 0, prefix: str = 'a') -> TrialExpansion:
    """
    Polynomial basis (x/L)**k for k = start .. start + n_terms - 1.

    start=2 gives x², x³, ... which already satisfy the clamped conditions
    w(0) = w'(0) = 0; start=0 is the complete basis that needs the
    conditions imposed separately (multipliers or penalty).
    """
    if n_terms < 1:
        raise ValueError(f"n_terms must be >= 1, got {n_terms}")
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    coefficients = sp.symbols(f'{prefix}_{start}:{start + n_terms}', real=True)
    basis = tuple((x / length) ** k for k in range(start, start + n_terms))
    return TrialExpansion(coefficients=tuple(coefficients), basis=basis, variable=x)
