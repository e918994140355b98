"""
RITZ METHOD: CANTILEVER VIBRATION
=================================

Runs the four Ritz variants for the clamped-free beam and compares the
nondimensional eigenvalues ω²ρAL⁴/EI with (β_k L)⁴ from
1 + cos βL cosh βL = 0.

EXAMPLE USAGE:
--------------
python demos/run_ritz_cantilever.py --terms 4
python demos/run_ritz_cantilever.py --method penalty --alpha 1e4
python demos/run_ritz_cantilever.py --symbolic --terms 2
python demos/run_ritz_cantilever.py --study --plot artifacts/ritz.png
"""

import argparse
import os

import sympy as sp

from fe_worksheets.config import CONFIG
from fe_worksheets.ritz import ritz_problem, exact_eigenvalues, cantilever_roots, frequency_equation
from fe_worksheets.ritz.methods import METHOD_OPTIONS
from fe_worksheets.ritz.study import convergence_study, best_estimates


def main():
    parser = argparse.ArgumentParser(
        description='Ritz method for cantilever free vibration',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--method', choices=CONFIG.ritz_methods, default=None,
                        help='Single Ritz variant (default: all four)')
    parser.add_argument('--terms', type=int, default=CONFIG.ritz_terms,
                        help=f'Free trial coefficients (default: {CONFIG.ritz_terms})')
    parser.add_argument('--modes', type=int, default=CONFIG.n_modes,
                        help=f'Modes to report (default: {CONFIG.n_modes})')
    parser.add_argument('--alpha', type=float, default=CONFIG.penalty_factor,
                        help=f'Penalty factor (default: {CONFIG.penalty_factor:g})')
    parser.add_argument('--moment-terms', type=int, default=None,
                        help='Moment terms for the mixed variant (default: same as --terms)')
    parser.add_argument('--symbolic', action='store_true', help='Exact eigenvalues (keep --terms small)')
    parser.add_argument('--study', action='store_true', help='Convergence table over 1..terms')
    parser.add_argument('--plot', type=str, default=None, help='Save the convergence plot to this path')
    args = parser.parse_args()

    methods = [args.method] if args.method else CONFIG.ritz_methods

    print("=" * 70)
    print("CANTILEVER FREE VIBRATION - RITZ METHOD")
    print("=" * 70)
    print("Frequency equation:", frequency_equation(), "= 0")
    roots = cantilever_roots(args.modes)
    exact = exact_eigenvalues(args.modes)
    for k, (r, lam) in enumerate(zip(roots, exact), start=1):
        print(f"  mode {k}: βL = {r:.6f}   (βL)⁴ = {lam:.4f}")
    print()

    options = {'alpha': args.alpha, 'moment_terms': args.moment_terms}
    for method in methods:
        kwargs = {k: v for k, v in options.items() if k in METHOD_OPTIONS[method]}
        problem = ritz_problem(method, args.terms, **kwargs).nondimensional()

        print(f"{method.upper()} ({problem.n_coefficients} coefficients)")
        print("-" * 70)
        if args.symbolic:
            for k, lam in enumerate(problem.eigenvalues(symbolic=True, n_modes=args.modes), start=1):
                print(f"  λ{k} = {lam}  ≈ {float(sp.N(lam)):.4f}")
        else:
            values = problem.eigenvalues(n_modes=args.modes)
            for k, lam in enumerate(values, start=1):
                ref = exact[k - 1] if k <= len(exact) else float('nan')
                print(f"  λ{k} = {lam:12.4f}   exact {ref:12.4f}   error {100 * (lam - ref) / ref:+8.4f} %")
        print()

    if args.study:
        df = convergence_study(methods, range(1, args.terms + 1), n_modes=args.modes, **options)
        print("CONVERGENCE (largest term count per method / mode)")
        print("-" * 70)
        print(best_estimates(df).to_string(index=False))

        if args.plot:
            import matplotlib
            matplotlib.use('Agg')
            import matplotlib.pyplot as plt
            from fe_worksheets.viz import plot_convergence

            os.makedirs(os.path.dirname(args.plot) or '.', exist_ok=True)
            ax = plot_convergence(df, mode=1)
            ax.figure.savefig(args.plot, dpi=150, bbox_inches='tight')
            plt.close(ax.figure)
            print(f"Saved: {args.plot}")


if __name__ == "__main__":
    main()
