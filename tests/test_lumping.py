# File: tests/test_lumping.py
"""
Lumped mass matrices: row sum, HRZ and nodal quadrature.

The 8-node serendipity element is the textbook case where the schemes
disagree: row summing puts NEGATIVE mass at the corners.
"""

import pytest
import sympy as sp

from fe_worksheets.catalog import UNIT
from fe_worksheets.elements.continuum import consistent_mass_matrix, element_mass, rectangle_coords
from fe_worksheets.elements.lumping import (
    hrz_lumping, lumped_mass_matrix, mass_fractions, nodal_quadrature_mass, row_sum_lumping,
)
from fe_worksheets.elements.shape import Q4, T3, Q8, H8
from fe_worksheets.model import Material
from fe_worksheets.symbols import A, B, RHO, T


def _is_diagonal(M):
    return all(M[i, j] == 0 for i in range(M.shape[0]) for j in range(M.shape[1]) if i != j)


def test_serendipity_row_sum_has_negative_corners():
    """
    WHAT IS THIS TEST?
    ==================
    Row-sum lumping on the 8-node serendipity element: corners get -1/12
    and midsides 1/3 of the element mass.

    WHY DOES THIS MATTER?
    =====================
    A negative nodal mass makes explicit time stepping unstable. This is the
    reason HRZ lumping exists (next test).
    """
    coords = rectangle_coords(Q8, 2, 2)
    M = lumped_mass_matrix(Q8, UNIT, 'row_sum', coords)
    assert _is_diagonal(M)
    fractions = mass_fractions(M, dof_per_node=2)
    assert fractions[:4] == [sp.Rational(-1, 12)] * 4
    assert fractions[4:] == [sp.Rational(1, 3)] * 4
    print("✓ Row-sum Q8 corner masses are negative")


def test_serendipity_hrz_is_positive():
    """HRZ on Q8: corners 3/76, midsides 16/76 (all positive, total preserved)."""
    coords = rectangle_coords(Q8, 2, 2)
    M = lumped_mass_matrix(Q8, UNIT, 'hrz', coords)
    fractions = mass_fractions(M, dof_per_node=2)
    assert fractions[:4] == [sp.Rational(3, 76)] * 4
    assert fractions[4:] == [sp.Rational(4, 19)] * 4
    u_mass = sum(M[k, k] for k in range(0, 16, 2))
    assert u_mass == element_mass(Q8, UNIT, coords)


def test_serendipity_has_no_nodal_rule():
    with pytest.raises(ValueError, match="Nodal quadrature is not defined"):
        nodal_quadrature_mass(Q8, UNIT)


def test_q4_schemes_agree():
    """For the bilinear rectangle all three schemes give a quarter per node."""
    coords = rectangle_coords(Q4, 1, 1)
    for scheme in ('row_sum', 'hrz', 'nodal'):
        M = lumped_mass_matrix(Q4, UNIT, scheme, coords)
        assert _is_diagonal(M)
        assert mass_fractions(M, 2) == [sp.Rational(1, 4)] * 4
        assert mass_fractions(M, 2, direction=1) == [sp.Rational(1, 4)] * 4


def test_triangle_nodal_mass_symbolic():
    """Vertex rule on the triangle: ρ t (ab/2) / 3 at each node."""
    M = lumped_mass_matrix(T3, Material.symbolic(), 'nodal')
    for k in range(6):
        assert sp.simplify(M[k, k] - RHO * T * A * B / 6) == 0


def test_brick_nodal_mass():
    coords = rectangle_coords(H8, 1, 1, 1)
    M = lumped_mass_matrix(H8, UNIT, 'nodal', coords)
    assert M.shape == (24, 24)
    assert mass_fractions(M, 3, direction=2) == [sp.Rational(1, 8)] * 8


def test_hrz_with_explicit_total_mass():
    M = consistent_mass_matrix(Q4, UNIT, rectangle_coords(Q4, 1, 1), simplify=False)
    lumped = hrz_lumping(M, 2, total_mass=8)
    assert sum(lumped[k, k] for k in range(0, 8, 2)) == 8
    with pytest.raises(ValueError, match="not a multiple"):
        hrz_lumping(sp.eye(5), 2)


def test_row_sum_preserves_total():
    M = sp.Matrix([[2, 1], [1, 2]])
    assert row_sum_lumping(M) == sp.diag(3, 3)


def test_unknown_scheme():
    with pytest.raises(ValueError, match="Unknown lumping scheme"):
        lumped_mass_matrix(Q4, UNIT, 'optimal')
