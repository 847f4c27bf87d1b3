"""Ideal-gas water from the NIST Shomate equation."""

from __future__ import annotations

import math

from aqthermo.constants import R_GAS, T_REFERENCE
from aqthermo.properties import ThermoPropertiesSubstance

# NIST Chemistry WebBook, H2O(g), 500-1700 K
SHOMATE = (30.09200, 6.832514, 6.793435, -2.534480, 0.082139, -250.8810, 223.3967, -241.8264)

GIBBS_FORMATION = -228582.0  # J/mol at 298.15 K
ENTHALPY_FORMATION = -241826.0  # J/mol at 298.15 K
ENTROPY_STANDARD = 188.835  # J/(mol·K) at 298.15 K


def _shomate(temperature: float):
    a, b, c, d, e, f, _, h = SHOMATE
    t = temperature / 1000.0
    cp = a + b * t + c * t**2 + d * t**3 + e / t**2
    enthalpy = 1000.0 * (a * t + b * t**2 / 2 + c * t**3 / 3 + d * t**4 / 4 - e / t + f - h)
    entropy = a * math.log(t) + b * t + c * t**2 / 2 + d * t**3 / 3 - e / (2 * t**2)
    return cp, enthalpy, entropy


def water_ideal_gas(temperature: float) -> ThermoPropertiesSubstance:
    """Apparent properties of formation of ideal-gas water at 1 bar."""
    cp, enthalpy, entropy = _shomate(temperature)
    _, enthalpy_ref, entropy_ref = _shomate(T_REFERENCE)
    h = ENTHALPY_FORMATION + enthalpy - enthalpy_ref
    s = ENTROPY_STANDARD + entropy - entropy_ref
    g = GIBBS_FORMATION + (h - ENTHALPY_FORMATION) - (temperature * s - T_REFERENCE * ENTROPY_STANDARD)
    rt = R_GAS * temperature
    return ThermoPropertiesSubstance(
        gibbs_energy=g,
        enthalpy=h,
        entropy=s,
        heat_capacity_cp=cp,
        heat_capacity_cv=cp - R_GAS,
        volume=rt,
        helmholtz_energy=g - rt,
        internal_energy=h - rt,
    )
