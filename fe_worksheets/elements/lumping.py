# fe_worksheets/elements/lumping.py
"""
Lumped (diagonal) mass matrices.

Three classic ways to get a diagonal M from the same element:

- row sum: M_ii = Σ_j M_ij. Keeps total mass, but for the 8-node
  serendipity element the corner masses come out NEGATIVE (-1/12 of the
  total each).
- HRZ (Hinton-Rock-Zienkiewicz): keep only the diagonal of the consistent
  matrix and rescale it so each direction still carries the total mass.
  Always positive.
- nodal quadrature: integrate Nᵀ N with a rule whose points are the nodes
  (Lobatto on bars/quads/bricks, the vertex rule on triangles). Diagonal
  because N_i(x_j) = δ_ij.
"""

from typing import Optional, Sequence

import sympy as sp

from ..config import CONFIG
from ..kernel.dof import DOFManager
from ..kernel.integrate import gauss_integrate
from ..kernel.numeric import tidy
from ..model import ElementType, Material
from .continuum import (
    consistent_mass_matrix, expand_to_dofs, jacobian, rectangle_coords, section_factor,
)
from .shape import shape_functions, reference_variables


def row_sum_lumping(M: sp.Matrix) -> sp.Matrix:
    """Diagonal matrix of the row sums of M."""
    return sp.diag(*[sp.simplify(sum(M.row(i))) for i in range(M.shape[0])])


def hrz_lumping(M: sp.Matrix, dof_per_node: int, total_mass=None) -> sp.Matrix:
    """
    HRZ diagonal scaling of a consistent mass matrix.

    Args:
        M: Consistent mass matrix, node-interleaved DOFs
        dof_per_node: DOFs per node
        total_mass: Mass to preserve per direction; default is the sum of
            all entries of that direction's block of M

    Returns:
        Diagonal Matrix with M_ii scaled by total_mass / Σ_k M_kk per direction
    """
    n = M.shape[0]
    if n % dof_per_node:
        raise ValueError(f"Matrix size {n} is not a multiple of dof_per_node={dof_per_node}")
    dof = DOFManager(dof_per_node=dof_per_node)
    n_nodes = n // dof_per_node

    lumped = sp.zeros(n, n)
    for d in range(dof_per_node):
        idx = dof.direction_dofs(d, n_nodes)
        block = M.extract(idx, idx)
        mass = sum(block) if total_mass is None else sp.sympify(total_mass)
        diag_sum = sum(block[i, i] for i in range(n_nodes))
        for k in idx:
            lumped[k, k] = sp.simplify(M[k, k] * mass / diag_sum)
    return lumped


def nodal_quadrature_mass(
    element: ElementType,
    material: Material,
    coords: Optional[Sequence[Sequence]] = None,
) -> sp.Matrix:
    """
    Mass matrix integrated with a quadrature rule sampled at the nodes.

    Supported for elements whose nodes are the quadrature points:
    BAR2, Q4, H8 (2-point Lobatto per direction) and T3 (vertex rule).
    """
    if element.name not in ('BAR2', 'Q4', 'H8', 'T3'):
        raise ValueError(
            f"Nodal quadrature is not defined for {element.name}; use 'row_sum' or 'hrz'"
        )
    if coords is None:
        coords = rectangle_coords(element)

    N = shape_functions(element)
    _, detJ, _ = jacobian(element, coords)
    integrand = N.T * N * detJ * sp.sympify(material.rho) * section_factor(element, material)
    variables = reference_variables(element)

    if element.domain == 'tri':
        m = sp.zeros(element.n_nodes, element.n_nodes)
        for node in element.nodes:
            m += integrand.subs(dict(zip(variables, node)), simultaneous=True) * sp.Rational(1, 6)
    else:
        m = gauss_integrate(integrand, variables, 2, element.domain, rule='lobatto')
    return expand_to_dofs(m, element.dof_per_node)


def lumped_mass_matrix(
    element: ElementType,
    material: Material,
    scheme: str = 'hrz',
    coords: Optional[Sequence[Sequence]] = None,
) -> sp.Matrix:
    """
    Diagonal element mass matrix.

    scheme: 'row_sum', 'hrz' or 'nodal'
    """
    if scheme not in CONFIG.lumping_schemes:
        raise ValueError(f"Unknown lumping scheme '{scheme}'. Available: {CONFIG.lumping_schemes}")

    if scheme == 'nodal':
        return tidy(nodal_quadrature_mass(element, material, coords))

    M = consistent_mass_matrix(element, material, coords, simplify=False)
    if scheme == 'row_sum':
        return tidy(row_sum_lumping(M))
    return tidy(hrz_lumping(M, element.dof_per_node))


def mass_fractions(lumped: sp.Matrix, dof_per_node: int, direction: int = 0) -> list:
    """Share of the direction's total mass carried by each node."""
    dof = DOFManager(dof_per_node=dof_per_node)
    idx = dof.direction_dofs(direction, lumped.shape[0] // dof_per_node)
    masses = [lumped[k, k] for k in idx]
    total = sum(masses)
    return [sp.simplify(m / total) for m in masses]
