"""
8-NODE SERENDIPITY ELEMENT AND LUMPED MASS VARIANTS
===================================================

Derives the Q8 stiffness (exact and reduced 2x2 integration) and
compares the row-sum and HRZ lumped mass matrices with the consistent one.

WHAT TO LOOK FOR:
-----------------
- Reduced integration leaves one extra zero-energy mode (rank 12, not 13)
- Row-sum lumping gives NEGATIVE corner masses (-1/12 of the total)
- HRZ keeps them positive (3/76 at corners, 16/76 at midsides)

EXAMPLE USAGE:
--------------
python demos/run_serendipity_lumping.py
"""

import sympy as sp

from fe_worksheets.catalog import UNIT
from fe_worksheets.elements import Q8, stiffness_matrix, lumped_mass_matrix
from fe_worksheets.elements.continuum import rectangle_coords
from fe_worksheets.elements.lumping import mass_fractions
from fe_worksheets.kernel.numeric import numeric_rank


def main():
    square = rectangle_coords(Q8, 2, 2)

    print("=" * 70)
    print("Q8 SERENDIPITY: STIFFNESS RANK")
    print("=" * 70)
    K_full = stiffness_matrix(Q8, UNIT, coords=square)
    K_reduced = stiffness_matrix(Q8, UNIT, coords=square, gauss_order=2)
    print(f"exact integration : rank {numeric_rank(K_full)}")
    print(f"2x2 Gauss         : rank {numeric_rank(K_reduced)}")
    print()

    print("=" * 70)
    print("Q8 SERENDIPITY: LUMPED MASS (fraction of total, per node)")
    print("=" * 70)
    for scheme in ('row_sum', 'hrz'):
        M = lumped_mass_matrix(Q8, UNIT, scheme, coords=square)
        fractions = mass_fractions(M, Q8.dof_per_node)
        print(f"{scheme:8s} corners: {fractions[:4]}")
        print(f"{'':8s} midside: {fractions[4:]}")
    print()
    print("HRZ matrix (u DOFs):")
    sp.pprint(lumped_mass_matrix(Q8, UNIT, 'hrz', coords=square)[::2, ::2])


if __name__ == "__main__":
    main()
