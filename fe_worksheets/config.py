# fe_worksheets/config.py
"""
Derivation configuration and defaults.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class DerivationConfig:
    """Global derivation configuration."""

    # Symbolic post-processing
    simplify: bool = True

    # Quadrature points per direction when the Jacobian is not constant
    gauss_order: int = 3

    # Ritz study defaults
    ritz_terms: int = 4
    mixed_moment_terms: Optional[int] = None  # None -> same as ritz_terms
    penalty_factor: float = 1e6
    n_modes: int = 3

    # Patch-test geometry
    patch_nodes_per_edge: int = 2
    patch_mesh_size: float = 0.05

    # Available options
    plane_kinds: List[str] = None
    lumping_schemes: List[str] = None
    ritz_methods: List[str] = None

    def __post_init__(self):
        if self.plane_kinds is None:
            self.plane_kinds = ['plane_stress', 'plane_strain', 'solid']
        if self.lumping_schemes is None:
            self.lumping_schemes = ['row_sum', 'hrz', 'nodal']
        if self.ritz_methods is None:
            self.ritz_methods = ['conventional', 'lagrange', 'penalty', 'mixed']


# Global config instance
CONFIG = DerivationConfig()
