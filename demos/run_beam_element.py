"""
HERMITE BEAM ELEMENT WORKSHEET
==============================

Integrates the cubic Hermite functions to the classic 4x4 beam stiffness
EI/L³·[12, 6L, ...] and consistent mass ρAL/420·[156, 22L, ...], plus the
lumped variants and the 6x6 frame element.
"""

import sympy as sp

from fe_worksheets.elements.beam import (
    beam_stiffness_matrix, beam_mass_matrix, beam_lumped_mass_matrix, frame2d_stiffness_matrix,
)
from fe_worksheets.symbols import L, RHOA


def main():
    print("=" * 70)
    print("EULER-BERNOULLI BEAM ELEMENT")
    print("=" * 70)
    print("K:")
    sp.pprint(beam_stiffness_matrix())
    print()
    print("M (consistent) · 420 / (ρA L):")
    sp.pprint(sp.simplify(beam_mass_matrix() * 420 / (RHOA * L)))
    print()
    print("M (HRZ):")
    sp.pprint(beam_lumped_mass_matrix(scheme='hrz'))
    print()
    print("2D frame element (local):")
    sp.pprint(frame2d_stiffness_matrix())


if __name__ == "__main__":
    main()
