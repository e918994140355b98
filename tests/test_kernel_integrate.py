# File: tests/test_kernel_integrate.py
"""
Exact reference-domain integration and Gauss / Lobatto quadrature.
"""

import pytest
import sympy as sp

from fe_worksheets.kernel.integrate import (
    integrate_reference, gauss_integrate, gauss_points, lobatto_points,
    triangle_points, integrate_interval,
)
from fe_worksheets.symbols import XI, ETA, ZETA, A, X, L


def test_box_domain_moments():
    """
    ∫ over [-1, 1]^d: odd powers vanish, even powers give 2/(p+1) per direction.
    """
    assert integrate_reference(1, (XI,), 'line') == 2
    assert integrate_reference(XI**4, (XI,), 'line') == sp.Rational(2, 5)
    assert integrate_reference(XI**3, (XI,), 'line') == 0
    assert integrate_reference(1, (XI, ETA), 'quad') == 4
    assert integrate_reference(XI**2, (XI, ETA), 'quad') == sp.Rational(4, 3)
    assert integrate_reference(XI**2 * ETA**2 * ZETA**2, (XI, ETA, ZETA), 'hex') == sp.Rational(8, 27)
    print("✓ Box-domain moments are exact")


def test_triangle_moments():
    """
    Unit right triangle: ∫ ξ^p η^q = p! q! / (p + q + 2)!
    """
    assert integrate_reference(1, (XI, ETA), 'tri') == sp.Rational(1, 2)
    assert integrate_reference(XI, (XI, ETA), 'tri') == sp.Rational(1, 6)
    assert integrate_reference(XI * ETA, (XI, ETA), 'tri') == sp.Rational(1, 24)
    assert integrate_reference(XI**2, (XI, ETA), 'tri') == sp.Rational(1, 12)
    print("✓ Triangle moments are exact")


def test_symbolic_coefficients_survive():
    """Other symbols (side lengths, material) ride along as coefficients."""
    result = integrate_reference(A * XI**2 + A**2, (XI,), 'line')
    assert sp.simplify(result - (2 * A / 3 + 2 * A**2)) == 0


def test_matrix_integrand():
    m = sp.Matrix([[1, XI], [XI, XI**2]])
    result = integrate_reference(m, (XI,), 'line')
    assert result == sp.Matrix([[2, 0], [0, sp.Rational(2, 3)]])


def test_non_polynomial_integrand_rejected():
    with pytest.raises(ValueError, match="not polynomial"):
        integrate_reference(1 / (2 + XI), (XI,), 'line')


def test_domain_checks():
    with pytest.raises(ValueError, match="Unknown domain"):
        integrate_reference(1, (XI,), 'pentagon')
    with pytest.raises(ValueError, match="needs 2 variables"):
        integrate_reference(1, (XI,), 'quad')


def test_gauss_exactness_degree():
    """
    n Gauss points integrate polynomials of degree 2n - 1 exactly.
    2 points: exact for ξ², NOT for ξ⁴. 3 points: exact for ξ⁴.
    """
    assert gauss_integrate(XI**2, (XI,), 2, 'line') == sp.Rational(2, 3)
    assert gauss_integrate(XI**4, (XI,), 2, 'line') == sp.Rational(2, 9)
    assert gauss_integrate(XI**4, (XI,), 3, 'line') == sp.Rational(2, 5)
    assert gauss_integrate(XI**2 * ETA**2, (XI, ETA), 2, 'quad') == sp.Rational(4, 9)
    print("✓ Gauss rules have the expected degree of exactness")


def test_gauss_weights_sum_to_interval_length():
    for order in (1, 2, 3, 4):
        _, weights = gauss_points(order)
        assert float(sum(weights)) == pytest.approx(2.0, rel=1e-12)


def test_lobatto_rule_includes_end_points():
    points, weights = lobatto_points(2)
    assert points == [-1, 1]
    # ∫ξ² is 2/3, the 2-point Lobatto rule gives 2
    assert gauss_integrate(XI**2, (XI,), 2, 'line', rule='lobatto') == 2
    _, weights3 = lobatto_points(3)
    assert sum(weights3) == 2


def test_triangle_rules():
    """The 3-point rule is exact for quadratics, the centroid rule for linears."""
    assert gauss_integrate(XI**2, (XI, ETA), 3, 'tri') == sp.Rational(1, 12)
    assert gauss_integrate(XI + ETA, (XI, ETA), 1, 'tri') == sp.Rational(1, 3)
    with pytest.raises(ValueError):
        triangle_points(2)


def test_unknown_rule():
    with pytest.raises(ValueError, match="Unknown rule"):
        gauss_integrate(XI, (XI,), 2, 'line', rule='simpson')


def test_integrate_interval():
    assert sp.simplify(integrate_interval(X**2, X, 0, L) - L**3 / 3) == 0
    m = integrate_interval(sp.Matrix([[1, X]]), X, 0, L)
    assert m[0, 0] == L
