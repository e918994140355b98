# fe_worksheets - Symbolic FEM element and Ritz-method worksheets
"""
FE-WORKSHEETS: Closed-Form Finite Element Derivations
=====================================================

This package provides:
- Stiffness and mass matrices of continuum elements (Q4, T3, Q8, H8)
  derived by exact symbolic integration
- Lumped-mass variants (row sum, HRZ, nodal quadrature)
- Euler-Bernoulli beam and 2D frame element matrices
- The Ritz method for cantilever vibration in four variants
  (conventional, Lagrange multiplier, penalty, mixed) against the exact
  frequency equation
- The patch-test geometry as Gmsh input

ARCHITECTURE:
-------------
    kernel/         Shared machinery (DOF ordering, integration, Hessians, eigen)
    elements/       Element worksheets
    ritz/           Ritz-method worksheets
    mesh/           Patch-test geometry (.geo / Gmsh API)
    model.py        Material, BeamProperties, ElementType
    catalog.py      Numeric materials and beams
    config.py       Defaults (CONFIG)
    viz.py          Inspection plots
"""

from .config import CONFIG, DerivationConfig
from .model import Material, BeamProperties, ElementType
from .kernel import DOFManager, EigenSolveError

__version__ = "0.1.0"
