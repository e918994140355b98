# fe_worksheets/ritz/methods.py
"""
RITZ METHOD: Cantilever Beam Free Vibration
===========================================

PROBLEM:
--------
Euler-Bernoulli cantilever, clamped at x = 0, free at x = L:

    EI w'''' = ω² ρA w,    w(0) = w'(0) = 0,   w''(L) = w'''(L) = 0

The Ritz method replaces w by a finite expansion w = Σ a_k φ_k and makes
the Rayleigh quotient stationary:

    U(a)  = ½ ∫ EI (w'')² dx = ½ aᵀ K a
    T*(a) = ½ ∫ ρA w² dx     = ½ aᵀ M a       (kinetic energy / ω²)

K and M are pulled out of the energies as Hessians w.r.t. the
coefficients, and (K - λM) a = 0 with λ = ω² gives the frequencies.

VARIANTS:
---------
conventional  basis (x/L)², (x/L)³, ... satisfies the clamped conditions
lagrange      complete basis 1, x/L, ...; the conditions w(0) = 0 and
              L·w'(0) = 0 enter through multipliers μ:
                  Π = U - λT* + μ₁ w(0) + μ₂ L w'(0)
penalty       complete basis; the conditions are enforced approximately:
                  Π = U + ½ α (EI/L³) (w(0)² + (L w'(0))²) - λT*
              λ rises towards the constrained value as α → ∞
mixed         Hellinger-Reissner: an independent bending moment
              m = Σ b_j (x/L)^j,
                  Π = ∫ (m w'' - m²/(2EI)) dx - λT*
              Eliminating m gives K_eff = Cᵀ H⁻¹ C, which equals the
              conventional K when the moment space contains w''.

All matrices are built with the symbols EI, rhoA, L. `nondimensional()`
sets them to 1 so eigenvalues read as ω² ρA L⁴ / EI, directly comparable
with (β_k L)⁴ from the exact frequency equation.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

import numpy as np
import sympy as sp

from ..catalog import UNIT_BEAM
from ..config import CONFIG
from ..kernel.eigen import (
    bordered_eigenvalues, bordered_matrix, generalized_eigenvalues, symbolic_eigenvalues,
)
from ..kernel.integrate import integrate_interval
from ..kernel.numeric import tidy, to_numpy
from ..kernel.quadratic import constraint_matrix, hessian_matrix
from ..model import BeamProperties
from ..symbols import X, L, EI, RHOA, LAM
from .trial import TrialExpansion, polynomial_trial


@dataclass
class RitzProblem:
    """
    Discrete Ritz eigenproblem K·a = λ·M·a.

    K_sym / M_sym are in terms of the beam symbols EI, rhoA, L; the K and M
    properties substitute the values of `beam`. For the mixed method K_sym is
    the condensed stiffness Cᵀ H⁻¹ C.
    """
    method: str
    K_sym: sp.Matrix
    M_sym: sp.Matrix
    trial: TrialExpansion
    functional: sp.Expr
    constraints: Optional[sp.Matrix] = None     # G with G·a = 0 (lagrange)
    penalty: Optional[object] = None            # α (penalty)
    moment_trial: Optional[TrialExpansion] = None
    H_sym: Optional[sp.Matrix] = None           # ∫ φ_i φ_j / EI (mixed)
    C_sym: Optional[sp.Matrix] = None           # ∫ φ_i ψ_j'' (mixed)
    beam: BeamProperties = field(default_factory=BeamProperties)

    def _subs(self, matrix):
        return None if matrix is None else tidy(matrix.subs(self.beam.subs_map()))

    @property
    def K(self) -> sp.Matrix:
        return self._subs(self.K_sym)

    @property
    def M(self) -> sp.Matrix:
        return self._subs(self.M_sym)

    @property
    def G(self) -> Optional[sp.Matrix]:
        return self._subs(self.constraints)

    @property
    def n_coefficients(self) -> int:
        return self.trial.n_terms

    def with_beam(self, beam: BeamProperties) -> "RitzProblem":
        return replace(self, beam=beam)

    def nondimensional(self) -> "RitzProblem":
        """EI = rhoA = L = 1: eigenvalues become ω² ρA L⁴ / EI."""
        return self.with_beam(UNIT_BEAM)

    def saddle_matrix(self, lam=LAM) -> sp.Matrix:
        """
        Full Hessian of the stationary functional (before any condensation):
        the bordered matrix for lagrange, [[-H, C], [Cᵀ, -λM]] for mixed,
        K - λM otherwise.
        """
        if self.method == 'lagrange':
            return bordered_matrix(self.K, self.M, self.G, lam)
        if self.method == 'mixed':
            H, C = self._subs(self.H_sym), self._subs(self.C_sym)
            top = sp.Matrix.hstack(-H, C)
            bottom = sp.Matrix.hstack(C.T, -lam * self.M)
            return sp.Matrix.vstack(top, bottom)
        return self.K - lam * self.M

    def eigenvalues(self, symbolic: bool = False, n_modes: Optional[int] = None) -> Union[List, np.ndarray]:
        """
        Eigenvalues λ = ω², ascending.

        symbolic=True returns exact sympy roots of the characteristic (or
        bordered) determinant; otherwise a float array from scipy.
        """
        if symbolic:
            if self.method == 'lagrange':
                roots = bordered_eigenvalues(self.K, self.M, self.G)
            else:
                roots = symbolic_eigenvalues(self.K, self.M)
            return roots if n_modes is None else roots[:n_modes]

        values, _ = self.modes(n_modes)
        return values

    def modes(self, n_modes: Optional[int] = None):
        """Numeric eigenvalues and coefficient vectors (columns)."""
        K = to_numpy(self.K)
        M = to_numpy(self.M)
        G = to_numpy(self.G) if self.constraints is not None else None
        return generalized_eigenvalues(K, M, n_modes=n_modes, constraints=G)

    def mode_shape(self, vector) -> sp.Expr:
        """w(x) for a coefficient vector, with the beam values substituted."""
        return self.trial.evaluate(list(np.ravel(vector))).subs(self.beam.subs_map())


def beam_energies(trial: TrialExpansion, length=L, EI_=EI, rhoA=RHOA):
    """
    Strain energy U = ½∫EI w''² dx and kinetic coefficient T* = ½∫ρA w² dx.
    """
    x = trial.variable
    w = trial.expression
    U = sp.Rational(1, 2) * integrate_interval(EI_ * sp.diff(w, x, 2) ** 2, x, 0, length)
    T = sp.Rational(1, 2) * integrate_interval(rhoA * w ** 2, x, 0, length)
    return sp.expand(U), sp.expand(T)


def clamped_conditions(trial: TrialExpansion, length=L) -> List[sp.Expr]:
    """w(0) and L·w'(0): both vanish at a clamped end."""
    x = trial.variable
    w = trial.expression
    return [w.subs(x, 0), length * sp.diff(w, x).subs(x, 0)]


def conventional(n_terms: int, beam: Optional[BeamProperties] = None) -> RitzProblem:
    """Trial functions that satisfy the clamped conditions by construction."""
    trial = polynomial_trial(n_terms, X, L, start=2)
    U, T = beam_energies(trial)
    K = hessian_matrix(U, trial.coefficients)
    M = hessian_matrix(T, trial.coefficients)
    return RitzProblem(
        method='conventional', K_sym=K, M_sym=M, trial=trial,
        functional=U - LAM * T, beam=beam or BeamProperties(),
    )


def lagrange(n_terms: int, beam: Optional[BeamProperties] = None) -> RitzProblem:
    """
    Complete basis of n_terms + 2 functions; the two clamped conditions are
    carried by Lagrange multipliers, leaving n_terms free coefficients.
    """
    trial = polynomial_trial(n_terms + 2, X, L, start=0)
    U, T = beam_energies(trial)
    conditions = clamped_conditions(trial)
    multipliers = sp.symbols('mu_1:3', real=True)
    functional = U - LAM * T + sum(mu * g for mu, g in zip(multipliers, conditions))
    return RitzProblem(
        method='lagrange',
        K_sym=hessian_matrix(U, trial.coefficients),
        M_sym=hessian_matrix(T, trial.coefficients),
        trial=trial,
        functional=functional,
        constraints=constraint_matrix(conditions, trial.coefficients),
        beam=beam or BeamProperties(),
    )


def penalty(n_terms: int, beam: Optional[BeamProperties] = None, alpha=None) -> RitzProblem:
    """
    Complete basis of n_terms + 2 functions with the clamped conditions
    enforced by a penalty α·EI/L³ (α dimensionless; may be a symbol).
    """
    alpha = CONFIG.penalty_factor if alpha is None else alpha
    # Same decimal digits as the float repr, as an exact rational
    alpha = sp.Rational(str(alpha)) if not isinstance(alpha, sp.Basic) else alpha
    trial = polynomial_trial(n_terms + 2, X, L, start=0)
    U, T = beam_energies(trial)
    w0, slope0 = clamped_conditions(trial)
    Up = U + sp.Rational(1, 2) * alpha * EI / L**3 * (w0**2 + slope0**2)
    return RitzProblem(
        method='penalty',
        K_sym=hessian_matrix(Up, trial.coefficients),
        M_sym=hessian_matrix(T, trial.coefficients),
        trial=trial,
        functional=sp.expand(Up) - LAM * T,
        penalty=alpha,
        beam=beam or BeamProperties(),
    )


def mixed(n_terms: int, beam: Optional[BeamProperties] = None,
          moment_terms: Optional[int] = None) -> RitzProblem:
    """
    Hellinger-Reissner mixed Ritz: displacement w (clamped basis, n_terms)
    and bending moment m (complete basis, moment_terms) approximated
    independently; m is condensed out of the stiffness.
    """
    if moment_terms is None:
        moment_terms = CONFIG.mixed_moment_terms or n_terms
    trial = polynomial_trial(n_terms, X, L, start=2)
    moment = polynomial_trial(moment_terms, X, L, start=0, prefix='b')
    _, T = beam_energies(trial)

    w, m = trial.expression, moment.expression
    hr = integrate_interval(m * sp.diff(w, X, 2) - m**2 / (2 * EI), X, 0, L)

    variables = list(moment.coefficients) + list(trial.coefficients)
    saddle = hessian_matrix(hr, variables)
    p = moment.n_terms
    H = -saddle[:p, :p]
    C = saddle[:p, p:]
    K_eff = C.T * H.LUsolve(C)

    return RitzProblem(
        method='mixed',
        K_sym=tidy(K_eff),
        M_sym=hessian_matrix(T, trial.coefficients),
        trial=trial,
        functional=sp.expand(hr) - LAM * T,
        moment_trial=moment,
        H_sym=H,
        C_sym=C,
        beam=beam or BeamProperties(),
    )


_METHODS = {
    'conventional': conventional,
    'lagrange': lagrange,
    'penalty': penalty,
    'mixed': mixed,
}

# Keyword options each variant accepts
METHOD_OPTIONS = {
    'conventional': (),
    'lagrange': (),
    'penalty': ('alpha',),
    'mixed': ('moment_terms',),
}


def ritz_problem(method: str, n_terms: Optional[int] = None,
                 beam: Optional[BeamProperties] = None, **kwargs) -> RitzProblem:
    """
    Build a Ritz problem by method name.

    Extra keyword arguments go to the variant: alpha (penalty),
    moment_terms (mixed). Any other option raises ValueError.
    """
    if method not in CONFIG.ritz_methods:
        raise ValueError(f"Unknown Ritz method '{method}'. Available: {CONFIG.ritz_methods}")
    n_terms = CONFIG.ritz_terms if n_terms is None else n_terms
    if n_terms < 1:
        raise ValueError(f"n_terms must be >= 1, got {n_terms}")
    unknown = sorted(set(kwargs) - set(METHOD_OPTIONS[method]))
    if unknown:
        raise ValueError(
            f"Method '{method}' does not take {unknown}. Options: {list(METHOD_OPTIONS[method])}"
        )
    return _METHODS[method](n_terms, beam=beam, **kwargs)
