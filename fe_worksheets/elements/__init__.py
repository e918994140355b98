# fe_worksheets/elements - Closed-form element matrices
"""
Element worksheets: shape functions, stiffness, consistent and lumped mass.

    shape.py       element library (BAR2, Q4, T3, Q8, H8)
    continuum.py   B matrix, elasticity matrix, K and consistent M
    lumping.py     row-sum, HRZ and nodal-quadrature lumped mass
    beam.py        Hermite beam and 2D frame matrices
"""

from .shape import BAR2, Q4, T3, Q8, H8, ELEMENTS, get_element, shape_functions
from .continuum import (
    b_matrix,
    constitutive_matrix,
    consistent_mass_matrix,
    element_mass,
    rectangle_coords,
    stiffness_matrix,
)
from .lumping import lumped_mass_matrix, row_sum_lumping, hrz_lumping

__all__ = [
    'BAR2', 'Q4', 'T3', 'Q8', 'H8', 'ELEMENTS', 'get_element', 'shape_functions',
    'b_matrix', 'constitutive_matrix', 'consistent_mass_matrix', 'element_mass',
    'rectangle_coords', 'stiffness_matrix',
    'lumped_mass_matrix', 'row_sum_lumping', 'hrz_lumping',
]
