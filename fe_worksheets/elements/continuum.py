# fe_worksheets/elements/continuum.py
"""
CONTINUUM ELEMENTS: Stiffness and Consistent Mass by Symbolic Integration
=========================================================================

PURPOSE:
--------
Derive closed-form element matrices for isoparametric continuum elements:

    K = ∫ Bᵀ D B t |J| dξ dη        (t → 1 for the brick)
    M = ∫ ρ t Nᵀ N |J| dξ dη

The worksheet steps are always the same:
1. Shape functions N(ξ, η) over the reference domain (shape.py)
2. Geometry x(ξ) = Σ N_i x_i and its Jacobian J = ∂x/∂ξ
3. Physical derivatives ∂N/∂x = J⁻¹ ∂N/∂ξ assembled into B
4. Integrate to closed form

INTEGRATION:
------------
For rectangles, bricks and straight-sided triangles J is constant, so the
integrand is a polynomial in ξ and is integrated EXACTLY term by term.
A distorted quadrilateral has a rational integrand; it is integrated
with Gauss quadrature instead. Passing `gauss_order` explicitly forces
quadrature, which is how reduced-integration variants are derived
(e.g. Q8 with 2x2 points).

DOF ORDER:
----------
Node-interleaved: [u1, v1, u2, v2, ...] (kernel.dof.DOFManager).
Strains in Voigt order with engineering shear:
    2D: (εxx, εyy, γxy)
    3D: (εxx, εyy, εzz, γxy, γyz, γzx)
"""

from typing import List, Optional, Sequence, Tuple

import sympy as sp

from ..config import CONFIG
from ..kernel.dof import DOFManager
from ..kernel.integrate import integrate_reference, gauss_integrate
from ..kernel.numeric import tidy
from ..model import ElementType, Material
from ..symbols import A, B, C
from .shape import shape_functions, natural_derivatives, reference_variables


def rectangle_coords(element: ElementType, a=A, b=B, c=C) -> List[Tuple]:
    """
    Node coordinates of the element's standard physical shape.

    Q4/Q8: a x b rectangle centred at the origin
    H8:    a x b x c brick centred at the origin
    T3:    right triangle with legs a (along x) and b (along y)
    BAR2:  bar of length a centred at the origin
    """
    half = (sp.sympify(a) / 2, sp.sympify(b) / 2, sp.sympify(c) / 2)
    if element.domain == 'tri':
        scale = (sp.sympify(a), sp.sympify(b))
        return [tuple(s * r for s, r in zip(scale, node)) for node in element.nodes]
    return [tuple(h * r for h, r in zip(half, node)) for node in element.nodes]


def _coords_matrix(element: ElementType, coords: Sequence[Sequence]) -> sp.Matrix:
    if len(coords) != element.n_nodes:
        raise ValueError(
            f"{element.name} needs {element.n_nodes} node coordinates, got {len(coords)}"
        )
    X = sp.Matrix([[sp.nsimplify(v) for v in node] for node in coords])
    if X.shape[1] != element.dim:
        raise ValueError(f"{element.name} node coordinates must be {element.dim}D")
    return X


def jacobian(element: ElementType, coords: Sequence[Sequence]):
    """
    Jacobian of the isoparametric map.

    Returns:
        J: (dim x dim) Matrix, J[k, j] = ∂x_j/∂ξ_k
        detJ: its determinant, positive for a valid node order
        constant: True if J does not depend on the natural coordinates

    Raises:
        ValueError: if det J <= 0 (at the reference nodes when J varies),
            i.e. the nodes run clockwise or the element is degenerate
    """
    X = _coords_matrix(element, coords)
    J = (natural_derivatives(element) * X).applyfunc(sp.expand)
    detJ = sp.expand(J.det())
    variables = reference_variables(element)
    constant = not (J.free_symbols & set(variables))
    _check_orientation(element, detJ, constant, variables)
    return J, detJ, constant


def _check_orientation(element: ElementType, detJ, constant: bool, variables) -> None:
    # Only a sign sympy can decide is checked (is_positive None passes)
    samples = [detJ] if constant else [
        detJ.subs(dict(zip(variables, node)), simultaneous=True) for node in element.nodes
    ]
    for value in samples:
        if sp.sympify(value).is_positive is False:
            raise ValueError(f"{element.name} node order is clockwise or degenerate")


def physical_derivatives(element: ElementType, coords: Sequence[Sequence]) -> sp.Matrix:
    """∂N/∂x as a (dim x n_nodes) Matrix."""
    J, detJ, constant = jacobian(element, coords)
    Jinv = J.inv() if constant else J.adjugate() / detJ
    return (Jinv * natural_derivatives(element)).applyfunc(sp.expand if constant else sp.together)


def b_matrix(element: ElementType, coords: Sequence[Sequence]) -> sp.Matrix:
    """Strain-displacement operator B with ε = B·u."""
    dN = physical_derivatives(element, coords)
    dof = DOFManager(dof_per_node=element.dof_per_node)
    n = element.n_nodes

    if element.dim == 1:
        Bm = sp.zeros(1, dof.ndof(n))
        for i in range(n):
            Bm[0, dof.idx(i, 0)] = dN[0, i]
        return Bm

    if element.dim == 2:
        Bm = sp.zeros(3, dof.ndof(n))
        for i in range(n):
            Nx, Ny = dN[0, i], dN[1, i]
            u, v = dof.idx(i, 0), dof.idx(i, 1)
            Bm[0, u] = Nx
            Bm[1, v] = Ny
            Bm[2, u] = Ny
            Bm[2, v] = Nx
        return Bm

    Bm = sp.zeros(6, dof.ndof(n))
    for i in range(n):
        Nx, Ny, Nz = dN[0, i], dN[1, i], dN[2, i]
        u, v, w = dof.idx(i, 0), dof.idx(i, 1), dof.idx(i, 2)
        Bm[0, u] = Nx
        Bm[1, v] = Ny
        Bm[2, w] = Nz
        Bm[3, u], Bm[3, v] = Ny, Nx
        Bm[4, v], Bm[4, w] = Nz, Ny
        Bm[5, u], Bm[5, w] = Nz, Nx
    return Bm


def default_kind(element: ElementType) -> str:
    return {1: 'uniaxial', 2: 'plane_stress', 3: 'solid'}[element.dim]


def constitutive_matrix(material: Material, kind: str = 'plane_stress') -> sp.Matrix:
    """
    Isotropic elasticity matrix D with σ = D·ε.

    kind: 'plane_stress', 'plane_strain', 'solid' (or 'uniaxial' for bars)
    """
    E, nu = sp.sympify(material.E), sp.sympify(material.nu)

    if kind == 'uniaxial':
        return sp.Matrix([[E]])

    if kind == 'plane_stress':
        return E / (1 - nu**2) * sp.Matrix([
            [1,  nu, 0],
            [nu, 1,  0],
            [0,  0,  (1 - nu) / 2],
        ])

    if kind == 'plane_strain':
        return E / ((1 + nu) * (1 - 2 * nu)) * sp.Matrix([
            [1 - nu, nu,     0],
            [nu,     1 - nu, 0],
            [0,      0,      (1 - 2 * nu) / 2],
        ])

    if kind == 'solid':
        G = E / (2 * (1 + nu))
        g = E / ((1 + nu) * (1 - 2 * nu))
        return sp.Matrix([
            [(1 - nu) * g, nu * g,       nu * g,       0, 0, 0],
            [nu * g,       (1 - nu) * g, nu * g,       0, 0, 0],
            [nu * g,       nu * g,       (1 - nu) * g, 0, 0, 0],
            [0,            0,            0,            G, 0, 0],
            [0,            0,            0,            0, G, 0],
            [0,            0,            0,            0, 0, G],
        ])

    raise ValueError(f"Unknown constitutive kind '{kind}'. Available: {CONFIG.plane_kinds + ['uniaxial']}")


def _check_kind(element: ElementType, kind: str) -> None:
    dims = {'uniaxial': 1, 'plane_stress': 2, 'plane_strain': 2, 'solid': 3}
    if kind not in dims:
        raise ValueError(f"Unknown constitutive kind '{kind}'. Available: {sorted(dims)}")
    if dims[kind] != element.dim:
        raise ValueError(f"Kind '{kind}' does not apply to the {element.dim}D element {element.name}")


def section_factor(element: ElementType, material: Material):
    # Plate thickness for plane elements, cross-section area for bars
    return sp.Integer(1) if element.dim == 3 else sp.sympify(material.thickness)


def _integrate(element: ElementType, integrand, constant: bool, gauss_order: Optional[int]):
    variables = reference_variables(element)
    if gauss_order is None and constant:
        return integrate_reference(integrand, variables, element.domain)
    order = gauss_order if gauss_order is not None else CONFIG.gauss_order
    return gauss_integrate(integrand, variables, order, element.domain)


def stiffness_matrix(
    element: ElementType,
    material: Material,
    coords: Optional[Sequence[Sequence]] = None,
    kind: Optional[str] = None,
    gauss_order: Optional[int] = None,
    simplify: Optional[bool] = None,
) -> sp.Matrix:
    """
    Element stiffness matrix K = ∫ Bᵀ D B t |J| dΩ.

    Args:
        element: ElementType from the element library (Q4, T3, Q8, H8, BAR2)
        material: Material (symbolic or numeric)
        coords: Node coordinates; default is the symbolic rectangle/brick
        kind: Constitutive law; default plane_stress (2D), solid (3D)
        gauss_order: Force Gauss quadrature with this many points per direction
        simplify: Tidy entries (default CONFIG.simplify)

    Returns:
        (ndof x ndof) symmetric sympy Matrix
    """
    if coords is None:
        coords = rectangle_coords(element)
    kind = kind or default_kind(element)
    _check_kind(element, kind)
    simplify = CONFIG.simplify if simplify is None else simplify

    Bm = b_matrix(element, coords)
    D = constitutive_matrix(material, kind)
    _, detJ, constant = jacobian(element, coords)

    integrand = Bm.T * D * Bm * detJ * section_factor(element, material)
    K = _integrate(element, integrand, constant, gauss_order)
    return tidy(K) if simplify else K


def expand_to_dofs(m: sp.Matrix, dof_per_node: int) -> sp.Matrix:
    """
    Expand a scalar (n x n) matrix to a vector field: each displacement
    direction gets the same block, with no coupling between directions.
    """
    n = m.shape[0]
    dof = DOFManager(dof_per_node=dof_per_node)
    M = sp.zeros(dof.ndof(n), dof.ndof(n))
    for i in range(n):
        for j in range(n):
            for d in range(dof_per_node):
                M[dof.idx(i, d), dof.idx(j, d)] = m[i, j]
    return M


def scalar_mass_matrix(
    element: ElementType,
    material: Material,
    coords: Optional[Sequence[Sequence]] = None,
    gauss_order: Optional[int] = None,
) -> sp.Matrix:
    """m_ij = ρ t ∫ N_i N_j |J| dΩ (one displacement direction)."""
    if coords is None:
        coords = rectangle_coords(element)
    N = shape_functions(element)
    _, detJ, constant = jacobian(element, coords)
    rho = sp.sympify(material.rho)
    integrand = N.T * N * detJ * rho * section_factor(element, material)
    return _integrate(element, integrand, constant, gauss_order)


def consistent_mass_matrix(
    element: ElementType,
    material: Material,
    coords: Optional[Sequence[Sequence]] = None,
    gauss_order: Optional[int] = None,
    simplify: Optional[bool] = None,
) -> sp.Matrix:
    """
    Consistent mass matrix M = ∫ ρ t Nᵀ N |J| dΩ over all DOFs.

    Same shape functions as the stiffness, so M is full (not diagonal).
    """
    simplify = CONFIG.simplify if simplify is None else simplify
    m = scalar_mass_matrix(element, material, coords, gauss_order)
    M = expand_to_dofs(m, element.dof_per_node)
    return tidy(M) if simplify else M


def element_measure(element: ElementType, coords: Optional[Sequence[Sequence]] = None):
    """Length, area or volume of the element."""
    if coords is None:
        coords = rectangle_coords(element)
    _, detJ, _ = jacobian(element, coords)
    # |J| is polynomial for every element in the library
    return sp.simplify(integrate_reference(detJ, reference_variables(element), element.domain))


def element_mass(element: ElementType, material: Material,
                 coords: Optional[Sequence[Sequence]] = None):
    """Total mass ρ·t·area (2D), ρ·volume (3D) or ρ·A·L (bar)."""
    return sp.simplify(
        sp.sympify(material.rho) * section_factor(element, material) * element_measure(element, coords)
    )
