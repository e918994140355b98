# fe_worksheets/ritz - Ritz method for cantilever beam vibration
"""
Four Ritz variants (conventional, Lagrange multiplier, penalty, mixed)
for the clamped-free Euler-Bernoulli beam, plus the exact solution they
are compared against.
"""

from .trial import TrialExpansion, polynomial_trial
from .methods import RitzProblem, ritz_problem, conventional, lagrange, penalty, mixed
from .exact import frequency_equation, cantilever_roots, exact_eigenvalues
from .study import convergence_study

__all__ = [
    'TrialExpansion', 'polynomial_trial',
    'RitzProblem', 'ritz_problem', 'conventional', 'lagrange', 'penalty', 'mixed',
    'frequency_equation', 'cantilever_roots', 'exact_eigenvalues',
    'convergence_study',
]
