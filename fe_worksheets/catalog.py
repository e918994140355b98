"""
CATALOG: MATERIALS AND BEAMS FOR NUMERIC WORKSHEETS
===================================================

PURPOSE:
--------
The derivations are carried out with symbolic properties (E_m, nu, rho, t)
so the closed form stays readable. When a worksheet wants numbers, it picks
an entry from this catalog instead of hardcoding E=210e9, nu=0.3 every time.

UNITS:
------
SI throughout: Pa, kg/m³, m. Thickness applies to 2D (plane) elements only.

UNIT entries use E = rho = t = 1 with exact rationals, which keeps
symbolic checks in the tests exact.
"""

import sympy as sp

from .model import Material, BeamProperties


STEEL = Material(E=210e9, nu=0.3, rho=7850.0, thickness=0.01, name="steel")
ALUMINIUM = Material(E=70e9, nu=0.33, rho=2700.0, thickness=0.01, name="aluminium")
UNIT = Material(E=sp.Integer(1), nu=sp.Rational(1, 4), rho=sp.Integer(1),
                thickness=sp.Integer(1), name="unit")

MATERIALS = {m.name: m for m in (STEEL, ALUMINIUM, UNIT)}

# Steel cantilever, 1 m long, 50 x 10 mm flat bar bending about its weak axis
STEEL_CANTILEVER = BeamProperties(
    EI=210e9 * 0.05 * 0.01**3 / 12.0,
    rhoA=7850.0 * 0.05 * 0.01,
    L=1.0,
)
UNIT_BEAM = BeamProperties(EI=sp.Integer(1), rhoA=sp.Integer(1), L=sp.Integer(1))


def get_material(name: str) -> Material:
    """Look up a catalog material by name."""
    try:
        return MATERIALS[name]
    except KeyError:
        raise ValueError(f"Unknown material '{name}'. Available: {sorted(MATERIALS)}")
