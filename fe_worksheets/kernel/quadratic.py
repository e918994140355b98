# fe_worksheets/kernel/quadratic.py
"""
QUADRATIC FORMS: Matrices from Energy Expressions
=================================================

A Ritz energy written in terms of unknown coefficients a = (a_1 ... a_n)
is a quadratic form

    U(a) = ½ aᵀ K a

so K is recovered exactly as the Hessian ∂²U/∂a_i∂a_j. The same trick
gives the mass matrix from the kinetic-energy functional, and the full
saddle-point matrix of a Lagrange-multiplier or mixed functional when the
multipliers / auxiliary fields are appended to the variable list.

Boundary conditions written as linear expressions in the coefficients
(w(0) = 0, w'(0) = 0) become rows of a constraint matrix G with G a = 0.
"""

from typing import Sequence

import sympy as sp


def hessian_matrix(expr, variables: Sequence) -> sp.Matrix:
    """
    Symbolic Hessian of `expr` with respect to `variables`.

    For a homogeneous quadratic form ½ aᵀ A a this returns A. Terms linear
    in the variables are dropped by the second derivative.
    """
    if len(variables) == 0:
        raise ValueError("Need at least one variable for a Hessian")
    return sp.hessian(sp.expand(expr), list(variables))


def constraint_matrix(constraints: Sequence, variables: Sequence) -> sp.Matrix:
    """
    Rows G of the homogeneous linear constraints G a = 0.

    Args:
        constraints: expressions that must vanish, e.g. [w.subs(x, 0)]
        variables: coefficient symbols

    Raises:
        ValueError: if a constraint has a term independent of the variables
    """
    G, rhs = sp.linear_eq_to_matrix([sp.expand(c) for c in constraints], list(variables))
    if any(entry != 0 for entry in rhs):
        raise ValueError(f"Constraints must be homogeneous, got right-hand side {list(rhs)}")
    return G


def is_quadratic_in(expr, variables: Sequence) -> bool:
    """True when `expr` is a polynomial of total degree <= 2 in `variables`."""
    expr = sp.expand(expr)
    if not expr.is_polynomial(*variables):
        return False
    return sp.Poly(expr, *variables).total_degree() <= 2
