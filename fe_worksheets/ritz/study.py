# fe_worksheets/ritz/study.py
"""Convergence tables comparing the Ritz variants with the exact eigenvalues."""

from typing import Iterable, Optional, Sequence

import pandas as pd

from ..config import CONFIG
from .exact import exact_eigenvalues
from .methods import METHOD_OPTIONS, ritz_problem


def convergence_study(
    methods: Optional[Sequence[str]] = None,
    term_counts: Iterable[int] = (1, 2, 3, 4, 5),
    n_modes: Optional[int] = None,
    **kwargs
) -> pd.DataFrame:
    """
    Nondimensional eigenvalues for each method and number of terms.

    Args:
        methods: Ritz variants (default: all four)
        term_counts: Numbers of free trial coefficients to try
        n_modes: Modes to keep per run (default CONFIG.n_modes)
        **kwargs: Variant options (alpha, moment_terms), each passed only
            to the methods that accept it

    Returns:
        DataFrame with columns:
        - method, n_terms, mode (1-based)
        - eigenvalue: ω² ρA L⁴ / EI from the Ritz solution
        - exact: (β_k L)⁴
        - rel_error: (eigenvalue - exact) / exact
    """
    methods = list(methods) if methods is not None else list(CONFIG.ritz_methods)
    n_modes = CONFIG.n_modes if n_modes is None else n_modes

    rows = []
    for method in methods:
        options = {k: v for k, v in kwargs.items() if k in METHOD_OPTIONS[method]}
        for n in term_counts:
            problem = ritz_problem(method, n, **options).nondimensional()
            values = problem.eigenvalues(n_modes=n_modes)
            exact = exact_eigenvalues(len(values))
            for k, (lam, ref) in enumerate(zip(values, exact), start=1):
                rows.append({
                    'method': method,
                    'n_terms': n,
                    'mode': k,
                    'eigenvalue': float(lam),
                    'exact': float(ref),
                    'rel_error': float((lam - ref) / ref),
                })

    return pd.DataFrame(rows, columns=['method', 'n_terms', 'mode', 'eigenvalue', 'exact', 'rel_error'])


def best_estimates(df: pd.DataFrame) -> pd.DataFrame:
    """Row with the largest n_terms for each (method, mode)."""
    if df.empty:
        return df
    idx = df.groupby(['method', 'mode'])['n_terms'].idxmax()
    return df.loc[idx].sort_values(['method', 'mode']).reset_index(drop=True)
