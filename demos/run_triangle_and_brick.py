"""
CST TRIANGLE AND TRILINEAR BRICK WORKSHEET
==========================================

T3: constant strain triangle, 6x6, exact for any straight-sided triangle.
H8: trilinear brick a x b x c, 24x24, exact integration.

EXAMPLE USAGE:
--------------
python demos/run_triangle_and_brick.py
python demos/run_triangle_and_brick.py --skip-brick
"""

import argparse

import sympy as sp

from fe_worksheets.catalog import UNIT
from fe_worksheets.elements import T3, H8, stiffness_matrix, consistent_mass_matrix
from fe_worksheets.kernel.numeric import numeric_rank
from fe_worksheets.symbols import A, B


def main():
    parser = argparse.ArgumentParser(description='T3 and H8 element matrices')
    parser.add_argument('--skip-brick', action='store_true', help='Only derive the triangle')
    args = parser.parse_args()

    print("=" * 70)
    print("T3 CONSTANT STRAIN TRIANGLE (legs a, b; unit material)")
    print("=" * 70)
    K = stiffness_matrix(T3, UNIT)
    sp.pprint(K)
    print()
    print("Consistent mass / (ρ t a b):")
    sp.pprint(sp.simplify(consistent_mass_matrix(T3, UNIT) / (A * B)))
    print()

    if args.skip_brick:
        return

    print("=" * 70)
    print("H8 TRILINEAR BRICK (unit cube, unit material)")
    print("=" * 70)
    K = stiffness_matrix(H8, UNIT, coords=[tuple(sp.Rational(v, 2) for v in node) for node in H8.nodes])
    print(f"size  = {K.shape}")
    print(f"rank  = {numeric_rank(K)} (expected 18 = 24 - 6 rigid-body modes)")
    print("K[0:3, 0:3]:")
    sp.pprint(K[0:3, 0:3])


if __name__ == "__main__":
    main()
