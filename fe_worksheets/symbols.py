# fe_worksheets/symbols.py
"""Standard sympy symbols shared by the worksheets."""

import sympy as sp

# Reference (natural) coordinates
XI, ETA, ZETA = sp.symbols('xi eta zeta', real=True)

# Beam axis coordinate
X = sp.Symbol('x', real=True)

# Element side lengths (rectangle a x b, brick a x b x c)
A, B, C = sp.symbols('a b c', positive=True)

# Material: use Em not E to avoid confusion with sympy's exp(1)
EM, NU, RHO, T = sp.symbols('E_m nu rho t', positive=True)

# Beam: bending stiffness, mass per unit length, length
EI, RHOA, L = sp.symbols('EI rhoA L', positive=True)

# Eigenvalue (omega squared) and penalty factor
LAM = sp.Symbol('lambda')
ALPHA = sp.Symbol('alpha', positive=True)

REFERENCE_COORDS = (XI, ETA, ZETA)
