# Material, BeamProperties, ElementType (frozen dataclasses)

from dataclasses import dataclass, field
from typing import Tuple

from .symbols import EM, NU, RHO, T, EI, RHOA, L


@dataclass(frozen=True)
class Material:
    """
    Isotropic linear-elastic material.

    Entries may be sympy symbols (closed-form derivations) or numbers
    (numeric worksheets). `thickness` is ignored by 3D elements.
    """
    E: object = EM
    nu: object = NU
    rho: object = RHO
    thickness: object = T
    name: str = "symbolic"

    @classmethod
    def symbolic(cls) -> "Material":
        return cls()


@dataclass(frozen=True)
class BeamProperties:
    """
    Euler-Bernoulli beam: bending stiffness EI, mass per unit length rhoA,
    length L.
    """
    EI: object = EI
    rhoA: object = RHOA
    L: object = L

    def subs_map(self) -> dict:
        """Map from the standard beam symbols to this beam's values."""
        return {EI: self.EI, RHOA: self.rhoA, L: self.L}


@dataclass(frozen=True)
class ElementType:
    """
    Element definition over a reference domain.

    domain: 'line' ([-1, 1]), 'quad' ([-1, 1]^2), 'tri' (unit right
    triangle), 'hex' ([-1, 1]^3)
    nodes: reference coordinates of the nodes, in node order
    """
    name: str
    domain: str
    dim: int
    nodes: Tuple[Tuple, ...] = field(repr=False)
    dof_per_node: int

    @property
    def n_nodes(self) -> int:
        return len(self.nodes)

    @property
    def ndof(self) -> int:
        return self.n_nodes * self.dof_per_node
