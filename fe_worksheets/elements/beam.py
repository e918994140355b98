# Euler-Bernoulli beam and 2D frame element matrices, derived from Hermite shape functions

import sympy as sp

from ..kernel.integrate import integrate_interval
from ..kernel.numeric import tidy
from ..symbols import X, EI as EI_SYM, RHOA as RHOA_SYM, L as L_SYM

E_SYM, A_SYM, I_SYM = sp.symbols('E A I', positive=True)


def hermite_shape_functions(x=X, L=L_SYM) -> sp.Matrix:
    """
    Cubic Hermite functions on [0, L].
    DOF order: [v_i, θ_i, v_j, θ_j]
    """
    s = x / L
    return sp.Matrix([[
        1 - 3 * s**2 + 2 * s**3,
        L * (s - 2 * s**2 + s**3),
        3 * s**2 - 2 * s**3,
        L * (s**3 - s**2),
    ]])


def linear_shape_functions(x=X, L=L_SYM) -> sp.Matrix:
    """Linear bar functions on [0, L]. DOF order: [u_i, u_j]"""
    return sp.Matrix([[1 - x / L, x / L]])


def beam_stiffness_matrix(EI=EI_SYM, L=L_SYM) -> sp.Matrix:
    """
    Bending stiffness K = ∫ EI N''ᵀ N'' dx.
    DOF order: [v_i, θ_i, v_j, θ_j]
    """
    d2N = sp.diff(hermite_shape_functions(X, L), X, 2)
    return tidy(integrate_interval(EI * d2N.T * d2N, X, 0, L))


def beam_mass_matrix(rhoA=RHOA_SYM, L=L_SYM) -> sp.Matrix:
    """Consistent mass M = ∫ ρA Nᵀ N dx (the classic ρAL/420 matrix)."""
    N = hermite_shape_functions(X, L)
    return tidy(integrate_interval(rhoA * N.T * N, X, 0, L))


def beam_lumped_mass_matrix(rhoA=RHOA_SYM, L=L_SYM, scheme: str = 'hrz') -> sp.Matrix:
    """
    Diagonal beam mass.

    scheme:
        'translational': half the mass at each node, no rotary inertia
        'hrz': diagonal of the consistent matrix scaled to the total mass,
               which gives rotary terms ρA·L³/78
    """
    m = rhoA * L
    if scheme == 'translational':
        return sp.diag(m / 2, 0, m / 2, 0)
    if scheme == 'hrz':
        M = beam_mass_matrix(rhoA, L)
        # Scale from the translational DOFs; rotations get the same factor
        scale = m / (M[0, 0] + M[2, 2])
        return tidy(sp.diag(*[M[k, k] * scale for k in range(4)]))
    raise ValueError(f"Unknown beam lumping scheme '{scheme}'. Use 'translational' or 'hrz'")


def bar_stiffness_matrix(EA=E_SYM * A_SYM, L=L_SYM) -> sp.Matrix:
    """Axial stiffness K = ∫ EA N'ᵀ N' dx. DOF order: [u_i, u_j]"""
    dN = sp.diff(linear_shape_functions(X, L), X)
    return tidy(integrate_interval(EA * dN.T * dN, X, 0, L))


def bar_mass_matrix(rhoA=RHOA_SYM, L=L_SYM) -> sp.Matrix:
    """Consistent axial mass ρAL/6·[[2, 1], [1, 2]]."""
    N = linear_shape_functions(X, L)
    return tidy(integrate_interval(rhoA * N.T * N, X, 0, L))


# Frame DOFs [uix, uiy, rzi, ujx, ujy, rzj]: axial at 0, 3; bending at 1, 2, 4, 5
_AXIAL = [0, 3]
_BENDING = [1, 2, 4, 5]


def _combine(axial: sp.Matrix, bending: sp.Matrix) -> sp.Matrix:
    k = sp.zeros(6, 6)
    for a, ga in enumerate(_AXIAL):
        for b, gb in enumerate(_AXIAL):
            k[ga, gb] = axial[a, b]
    for a, ga in enumerate(_BENDING):
        for b, gb in enumerate(_BENDING):
            k[ga, gb] = bending[a, b]
    return k


def frame2d_stiffness_matrix(E=E_SYM, A=A_SYM, I=I_SYM, L=L_SYM) -> sp.Matrix:
    """
    Local 2D frame stiffness in element coordinates (x along member).
    DOF order: [uix, uiy, rzi, ujx, ujy, rzj]
    """
    return _combine(bar_stiffness_matrix(E * A, L), beam_stiffness_matrix(E * I, L))


def frame2d_mass_matrix(rhoA=RHOA_SYM, L=L_SYM) -> sp.Matrix:
    """Local consistent 2D frame mass (axial + bending)."""
    return _combine(bar_mass_matrix(rhoA, L), beam_mass_matrix(rhoA, L))


def frame2d_transform(c, s) -> sp.Matrix:
    """
    6x6 transform from global DOFs to local DOFs (c = cos, s = sin of the member angle).
    """
    return sp.Matrix([
        [ c,  s, 0,  0, 0, 0],
        [-s,  c, 0,  0, 0, 0],
        [ 0,  0, 1,  0, 0, 0],
        [ 0,  0, 0,  c, s, 0],
        [ 0,  0, 0, -s, c, 0],
        [ 0,  0, 0,  0, 0, 1],
    ])


def frame2d_global_stiffness(E, A, I, L, c, s) -> sp.Matrix:
    """Tᵀ·k_local·T."""
    T = frame2d_transform(c, s)
    return tidy(T.T * frame2d_stiffness_matrix(E, A, I, L) * T)
