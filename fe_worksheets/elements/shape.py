# Element library: reference nodes + shape functions

import sympy as sp

from ..model import ElementType
from ..symbols import XI, ETA, ZETA, REFERENCE_COORDS

#
# Node numbering (reference coordinates):
#
#   Q4 / Q8:               T3:             H8 (bottom 1-4, top 5-8):
#
#   4---7---3              3                 8-------7
#   |       |              | \              /|      /|
#   8   +   6              |   \           5-------6 |
#   |       |              |     \         | 4-----|-3
#   1---5---2              1-------2       |/      |/
#                                          1-------2
#

BAR2 = ElementType(
    name='BAR2', domain='line', dim=1,
    nodes=((-1,), (1,)),
    dof_per_node=1,
)

Q4 = ElementType(
    name='Q4', domain='quad', dim=2,
    nodes=((-1, -1), (1, -1), (1, 1), (-1, 1)),
    dof_per_node=2,
)

T3 = ElementType(
    name='T3', domain='tri', dim=2,
    nodes=((0, 0), (1, 0), (0, 1)),
    dof_per_node=2,
)

Q8 = ElementType(
    name='Q8', domain='quad', dim=2,
    nodes=((-1, -1), (1, -1), (1, 1), (-1, 1),
           (0, -1), (1, 0), (0, 1), (-1, 0)),
    dof_per_node=2,
)

H8 = ElementType(
    name='H8', domain='hex', dim=3,
    nodes=((-1, -1, -1), (1, -1, -1), (1, 1, -1), (-1, 1, -1),
           (-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1)),
    dof_per_node=3,
)

ELEMENTS = {e.name: e for e in (BAR2, Q4, T3, Q8, H8)}


def get_element(name: str) -> ElementType:
    """Look up an element by name ('Q4', 'Q8', 'T3', 'H8', 'BAR2')."""
    try:
        return ELEMENTS[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown element '{name}'. Available: {sorted(ELEMENTS)}")


def reference_variables(element: ElementType) -> tuple:
    """Natural coordinates of the element's reference domain."""
    return REFERENCE_COORDS[:element.dim]


def _bar2(element):
    return [(1 + XI * xi_i) / 2 for (xi_i,) in element.nodes]


def _q4(element):
    return [(1 + XI * xi_i) * (1 + ETA * eta_i) / 4 for xi_i, eta_i in element.nodes]


def _t3(element):
    return [1 - XI - ETA, XI, ETA]


def _q8(element):
    N = []
    for xi_i, eta_i in element.nodes:
        if xi_i != 0 and eta_i != 0:
            # Corner node
            N.append((1 + XI * xi_i) * (1 + ETA * eta_i) * (XI * xi_i + ETA * eta_i - 1) / 4)
        elif xi_i == 0:
            # Midside on a horizontal edge
            N.append((1 - XI**2) * (1 + ETA * eta_i) / 2)
        else:
            # Midside on a vertical edge
            N.append((1 + XI * xi_i) * (1 - ETA**2) / 2)
    return N


def _h8(element):
    return [(1 + XI * xi_i) * (1 + ETA * eta_i) * (1 + ZETA * zeta_i) / 8
            for xi_i, eta_i, zeta_i in element.nodes]


_SHAPE_BUILDERS = {
    'BAR2': _bar2,
    'Q4': _q4,
    'T3': _t3,
    'Q8': _q8,
    'H8': _h8,
}


def shape_functions(element: ElementType) -> sp.Matrix:
    """Row Matrix [N_1 ... N_n] in reference coordinates."""
    try:
        builder = _SHAPE_BUILDERS[element.name]
    except KeyError:
        raise ValueError(f"No shape functions for element '{element.name}'")
    return sp.Matrix([[sp.expand(n) for n in builder(element)]])


def natural_derivatives(element: ElementType) -> sp.Matrix:
    """dN/dξ as a (dim x n_nodes) Matrix; row k is the derivative w.r.t. ξ_k."""
    N = shape_functions(element)
    return sp.Matrix([[sp.diff(n, v) for n in N] for v in reference_variables(element)])
