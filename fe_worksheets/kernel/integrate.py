# fe_worksheets/kernel/integrate.py
"""
REFERENCE-DOMAIN INTEGRATION: Exact Moments and Quadrature
==========================================================

PURPOSE:
--------
Every element matrix is an integral over a reference domain:

    line  [-1, 1]          quad  [-1, 1]^2
    hex   [-1, 1]^3        tri   unit right triangle (0,0), (1,0), (0,1)

When the integrand is a polynomial in the natural coordinates (constant
Jacobian) it is integrated EXACTLY, monomial by monomial:

    box:       ∫ ξ^p dξ = 2/(p+1) for even p, 0 for odd p (per direction)
    triangle:  ∫∫ ξ^p η^q = p! q! / (p+q+2)!

When the integrand is rational (distorted quadrilateral) or a reduced rule
is wanted on purpose, `gauss_integrate` samples it at tensor-product
Gauss-Legendre or Gauss-Lobatto points instead. A rule with n points per
direction is exact for degree 2n - 1 (Gauss) or 2n - 3 (Lobatto).

USAGE:
------
    integrate_reference(XI**2, (XI,), 'line')              # → 2/3
    gauss_integrate(XI**4, (XI,), 2, 'line')                # → 2/9 (not exact)
    gauss_integrate(N.T * N, (XI, ETA), 2, 'quad', rule='lobatto')
"""

from typing import List, Sequence, Tuple

import sympy as sp
from sympy.integrals.quadrature import gauss_legendre, gauss_lobatto

DOMAIN_DIMS = {'line': 1, 'quad': 2, 'tri': 2, 'hex': 3}

# Digits used for quadrature rules without a closed form in this module
_N_DIGITS = 20


def _check_domain(variables: Sequence, domain: str) -> None:
    if domain not in DOMAIN_DIMS:
        raise ValueError(f"Unknown domain '{domain}'. Available: {sorted(DOMAIN_DIMS)}")
    if len(variables) != DOMAIN_DIMS[domain]:
        raise ValueError(
            f"Domain '{domain}' needs {DOMAIN_DIMS[domain]} variables, got {len(variables)}"
        )


def monomial_moment(powers: Sequence[int], domain: str):
    """
    Exact integral of prod(var_i ** p_i) over a reference domain.

    Box domains ([-1, 1]^d) factor into 1D moments, 2/(p+1) for even p and 0
    for odd p. On the unit right triangle the moment is p! q! / (p+q+2)!.
    """
    if domain == 'tri':
        p, q = powers
        return sp.factorial(p) * sp.factorial(q) / sp.factorial(p + q + 2)
    result = sp.Integer(1)
    for p in powers:
        if p % 2:
            return sp.Integer(0)
        result *= sp.Rational(2, p + 1)
    return result


def integrate_reference(expr, variables: Sequence, domain: str):
    """
    Integrate a polynomial expression (or Matrix) exactly over a reference domain.

    Args:
        expr: sympy expression or Matrix, polynomial in `variables`
        variables: reference coordinates, e.g. (XI, ETA)
        domain: 'line', 'quad', 'tri' or 'hex'

    Returns:
        Integral with the same shape as `expr`. Coefficients may carry any
        other symbols (side lengths, material constants).

    Raises:
        ValueError: if the integrand is not polynomial in `variables`
    """
    _check_domain(variables, domain)
    if isinstance(expr, sp.MatrixBase):
        return expr.applyfunc(lambda e: integrate_reference(e, variables, domain))

    expr = sp.expand(sp.sympify(expr))
    if expr == 0:
        return sp.Integer(0)
    if not expr.is_polynomial(*variables):
        raise ValueError(
            f"Integrand is not polynomial in {tuple(variables)}; "
            f"use gauss_integrate instead"
        )
    poly = sp.Poly(expr, *variables)
    total = sp.Integer(0)
    for powers, coeff in poly.terms():
        total += coeff * monomial_moment(powers, domain)
    return total


def gauss_points(order: int) -> Tuple[List, List]:
    """
    Gauss-Legendre points and weights on [-1, 1].

    Orders 1-3 are exact (radicals); higher orders come from sympy with
    20 significant digits.
    """
    if order < 1:
        raise ValueError(f"Gauss order must be >= 1, got {order}")
    if order == 1:
        return [sp.Integer(0)], [sp.Integer(2)]
    if order == 2:
        g = 1 / sp.sqrt(3)
        return [-g, g], [sp.Integer(1), sp.Integer(1)]
    if order == 3:
        g = sp.sqrt(sp.Rational(3, 5))
        return [-g, sp.Integer(0), g], [sp.Rational(5, 9), sp.Rational(8, 9), sp.Rational(5, 9)]
    return gauss_legendre(order, _N_DIGITS)


def lobatto_points(order: int) -> Tuple[List, List]:
    """Gauss-Lobatto points and weights on [-1, 1]; the end points are included."""
    if order < 2:
        raise ValueError(f"Lobatto order must be >= 2, got {order}")
    if order == 2:
        return [sp.Integer(-1), sp.Integer(1)], [sp.Integer(1), sp.Integer(1)]
    if order == 3:
        return ([sp.Integer(-1), sp.Integer(0), sp.Integer(1)],
                [sp.Rational(1, 3), sp.Rational(4, 3), sp.Rational(1, 3)])
    return gauss_lobatto(order, _N_DIGITS)


def triangle_points(order: int) -> Tuple[List[Tuple], List]:
    """Symmetric rules on the unit right triangle: 1 point (centroid) or 3 points."""
    if order == 1:
        third = sp.Rational(1, 3)
        return [(third, third)], [sp.Rational(1, 2)]
    if order == 3:
        a, b = sp.Rational(1, 6), sp.Rational(2, 3)
        w = sp.Rational(1, 6)
        return [(a, a), (b, a), (a, b)], [w, w, w]
    raise ValueError(f"Triangle rules exist for 1 or 3 points, got {order}")


def gauss_integrate(expr, variables: Sequence, order: int, domain: str, rule: str = 'gauss'):
    """
    Integrate by tensor-product quadrature over a reference domain.

    `rule` is 'gauss' (Gauss-Legendre) or 'lobatto' (nodal quadrature on box
    domains). On the triangle `order` is the number of points (1 or 3).
    """
    _check_domain(variables, domain)
    if domain == 'tri':
        points, weights = triangle_points(order)
        samples = list(zip(points, weights))
    else:
        if rule == 'gauss':
            pts, wts = gauss_points(order)
        elif rule == 'lobatto':
            pts, wts = lobatto_points(order)
        else:
            raise ValueError(f"Unknown rule '{rule}'. Use 'gauss' or 'lobatto'")
        samples = [((p,), w) for p, w in zip(pts, wts)]
        for _ in range(len(variables) - 1):
            samples = [(pt + (p,), w * wt) for pt, w in samples for p, wt in zip(pts, wts)]

    total = None
    for point, weight in samples:
        term = expr.subs(dict(zip(variables, point)), simultaneous=True) * weight
        total = term if total is None else total + term
    if isinstance(total, sp.MatrixBase):
        return total.applyfunc(sp.expand)
    return sp.expand(total)


def integrate_interval(expr, x, a, b):
    """Exact sympy integral over [a, b] (expression or Matrix)."""
    if isinstance(expr, sp.MatrixBase):
        return expr.applyfunc(lambda e: sp.integrate(e, (x, a, b)))
    return sp.integrate(expr, (x, a, b))
