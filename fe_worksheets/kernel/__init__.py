# fe_worksheets/kernel - Element-agnostic derivation core
"""
KERNEL: THE SHARED DERIVATION MACHINERY
=======================================

Every worksheet, whatever element or trial space it uses, runs the same
few steps:

- map (node, local DOF) to a matrix index           (dof.py)
- integrate a polynomial over a reference domain    (integrate.py)
- pull a matrix out of a quadratic energy            (quadratic.py)
- solve K·φ = λ·M·φ exactly or numerically           (eigen.py)
- substitute numbers and check the result            (numeric.py)

The ELEMENT and RITZ packages supply the shape/trial functions; the kernel
does not care which.
"""

from .dof import DOFManager
from .eigen import EigenSolveError, generalized_eigenvalues, symbolic_eigenvalues
from .integrate import integrate_reference, gauss_integrate

__all__ = [
    'DOFManager',
    'EigenSolveError',
    'generalized_eigenvalues',
    'symbolic_eigenvalues',
    'integrate_reference',
    'gauss_integrate',
]
