# fe_worksheets/viz.py
"""
Inspection plots for single worksheet results.

Every function draws into an optional Axes and returns it, so the
worksheets can stack them in one figure or save them one by one.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import sympy as sp

from .mesh.patch_test import PatchTestGeometry
from .ritz.exact import cantilever_roots, exact_mode_shape
from .ritz.methods import RitzProblem
from .symbols import X


def _axes(ax):
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))
    return ax


def plot_frequency_equation(n_roots: int = 4, ax=None):
    """
    Plot cos βL + 1/cosh βL (same roots as 1 + cos βL cosh βL) and mark the roots.
    """
    ax = _axes(ax)
    roots = cantilever_roots(n_roots)
    b = np.linspace(0.0, roots[-1] + 1.0, 800)
    ax.plot(b, np.cos(b) + 1.0 / np.cosh(b), 'b-', linewidth=1.5, label='cos βL + 1/cosh βL')
    ax.axhline(0.0, color='k', linewidth=0.8)
    ax.plot(roots, np.zeros_like(roots), 'ro', label='roots')
    for k, r in enumerate(roots, start=1):
        ax.annotate(f'β{k}L = {r:.4f}', (r, 0.0), textcoords='offset points', xytext=(0, 8),
                    ha='center', fontsize=8)
    ax.set_xlabel('βL')
    ax.set_ylabel('frequency function')
    ax.set_title('Cantilever frequency equation')
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


def plot_mode_shapes(problem: RitzProblem, n_modes: int = 3, ax=None, n_points: int = 101):
    """Ritz mode shapes (solid) against the exact ones (dashed), tip deflection = 1."""
    ax = _axes(ax)
    problem = problem.nondimensional()
    _, vectors = problem.modes(n_modes)
    xi = np.linspace(0.0, 1.0, n_points)

    for k in range(vectors.shape[1]):
        w = sp.lambdify(X, problem.mode_shape(vectors[:, k]), modules='numpy')
        values = np.broadcast_to(np.asarray(w(xi), dtype=float), xi.shape)
        tip = values[-1] if abs(values[-1]) > 1e-12 else 1.0
        line, = ax.plot(xi, values / tip, linewidth=1.5, label=f'Ritz mode {k + 1}')
        ax.plot(xi, exact_mode_shape(k + 1, xi), '--', color=line.get_color(), linewidth=1.0)

    ax.set_xlabel('x / L')
    ax.set_ylabel('w / w(L)')
    ax.set_title(f'{problem.method} Ritz, {problem.n_coefficients} coefficients')
    ax.legend()
    ax.grid(True, alpha=0.3)
    return ax


def plot_convergence(df: pd.DataFrame, mode: int = 1, ax=None):
    """|relative error| vs number of terms, one line per method (log scale)."""
    ax = _axes(ax)
    sub = df[df['mode'] == mode]
    if sub.empty:
        raise ValueError(f"No rows for mode {mode}")
    for method, group in sub.groupby('method'):
        group = group.sort_values('n_terms')
        err = np.abs(group['rel_error'].to_numpy())
        ax.semilogy(group['n_terms'], np.maximum(err, 1e-16), 'o-', label=method)
    ax.set_xlabel('number of terms')
    ax.set_ylabel('|relative error|')
    ax.set_title(f'Ritz convergence, mode {mode}')
    ax.legend()
    ax.grid(True, which='both', alpha=0.3)
    return ax


def plot_patch_geometry(geometry: PatchTestGeometry, ax=None):
    """Draw the lines and label points and surfaces."""
    ax = _axes(ax)
    for line in geometry.lines.values():
        p, q = geometry.points[line.start], geometry.points[line.end]
        ax.plot([p.x, q.x], [p.y, q.y], 'k-', linewidth=1.2)
    for p in geometry.points.values():
        ax.plot(p.x, p.y, 'bo', markersize=4)
        ax.annotate(str(p.tag), (p.x, p.y), textcoords='offset points', xytext=(4, 4), fontsize=8)
    for tag in geometry.surfaces:
        xy = np.array(geometry.quad_coords(tag))
        cx, cy = xy.mean(axis=0)
        ax.text(cx, cy, f'S{tag}', ha='center', va='center', fontsize=9, color='gray')
    ax.set_aspect('equal')
    ax.set_title('Patch-test geometry')
    return ax
