"""Revised Helgeson-Kirkham-Flowers equations of state for aqueous species.

Tanger and Helgeson (1988) with the g-function of Shock et al. (1992). The
computation runs in calories; ``CTPM_HKFR`` records carry their coefficients
in SI units and are converted on entry.
"""

from __future__ import annotations

import logging
import math

from aqthermo.constants import CAL_TO_J
from aqthermo.eos.base import SubstanceModel
from aqthermo.eos.registry import GEN_EOS, register
from aqthermo.models import MethodGenEoS
from aqthermo.properties import ThermoPropertiesSubstance

logger = logging.getLogger(__name__)

THETA = 228.0  # K
PSI = 2600.0  # bar
ETA = 1.66027e5  # Å·cal/mol
R_HYDROGEN = 3.082  # Å, effective electrostatic radius of H+

# Born functions of water at 298.15 K and 1 bar
EPSILON_REFERENCE = 78.24513
Y_REFERENCE = -5.79865e-5  # 1/K

_STEP_T = 0.01  # K
_STEP_P = 0.1  # bar


def g_function(temperature: float, pressure: float, density: float) -> float:
    """Solvent function g (Å) of Shock et al. (1992); density in g/cm³."""
    if density >= 1.0:
        return 0.0
    t = temperature - 273.15
    ag = -2.037662 + 5.747000e-3 * t - 6.557892e-6 * t**2
    bg = 6.107361 - 1.074377e-2 * t + 1.268348e-5 * t**2
    g = ag * (1.0 - density) ** bg
    if 155.0 < t < 355.0 and pressure < 1000.0:
        x = (t - 155.0) / 300.0
        dp = 1000.0 - pressure
        g -= (x**4.8 + 36.66666716 * x**16) * (-1.504956e-10 * dp**3 + 5.01799e-14 * dp**4)
    return g


def born_coefficient(charge: float, wref: float, g: float) -> float:
    """Conventional Born coefficient ω (cal/mol) at a given value of g."""
    if charge == 0.0:
        return wref
    re_ref = charge**2 / (wref / ETA + charge / R_HYDROGEN)
    re = re_ref + abs(charge) * g
    return ETA * (charge**2 / re - charge / (R_HYDROGEN + g))


@register(GEN_EOS, MethodGenEoS.CTPM_HKF, MethodGenEoS.CTPM_HKFR)
class SoluteHKF(SubstanceModel):
    def evaluate(self, temperature, pressure, props, context):
        substance = self.substance
        hkf = self.require(substance.hkf, "hkf")
        to_cal = 1.0 if substance.method_gen_eos is MethodGenEoS.CTPM_HKF else 1.0 / CAL_TO_J
        a1, a2, a3, a4, c1, c2, wref = (
            value * to_cal
            for value in (hkf.a1, hkf.a2, hkf.a3, hkf.a4, hkf.c1, hkf.c2, hkf.wref)
        )
        g0 = substance.reference.gibbs_energy / CAL_TO_J
        h0 = substance.reference.enthalpy / CAL_TO_J
        s0 = substance.reference.entropy / CAL_TO_J
        z = substance.charge
        tr, pr = substance.reference_t, substance.reference_p

        water = context.solvent_properties(temperature, pressure, context.solvent_symbol)
        electro = context.electro_solvent_properties(
            temperature, pressure, context.solvent_symbol
        )
        t = temperature
        # pressure 0 means the saturation curve; the water model reports the actual value
        p = water.pressure if pressure == 0.0 else pressure

        rho = water.density_g_cm3
        rho_t, rho_p = water.density_t / 1000.0, water.density_p / 1000.0
        rho_tt, rho_tp, rho_pp = (
            water.density_tt / 1000.0,
            water.density_tp / 1000.0,
            water.density_pp / 1000.0,
        )

        def omega(dt: float, dp: float) -> float:
            density = (
                rho
                + rho_t * dt
                + rho_p * dp
                + 0.5 * rho_tt * dt**2
                + rho_tp * dt * dp
                + 0.5 * rho_pp * dp**2
            )
            return born_coefficient(z, wref, g_function(t + dt, p + dp, density))

        w = omega(0.0, 0.0)
        w_t = (omega(_STEP_T, 0.0) - omega(-_STEP_T, 0.0)) / (2.0 * _STEP_T)
        w_tt = (omega(_STEP_T, 0.0) - 2.0 * w + omega(-_STEP_T, 0.0)) / _STEP_T**2
        w_p = (omega(0.0, _STEP_P) - omega(0.0, -_STEP_P)) / (2.0 * _STEP_P)

        born = 1.0 / electro.epsilon - 1.0
        born_r = 1.0 / EPSILON_REFERENCE - 1.0
        y, x, q = electro.born_y, electro.born_x, electro.born_q

        dp_ref = p - pr
        ln_p = math.log((PSI + p) / (PSI + pr))
        solvation = a3 * dp_ref + a4 * ln_p
        t_th, tr_th = t - THETA, tr - THETA
        ln_t = math.log(tr * t_th / (t * tr_th))

        volume = (
            a1
            + a2 / (PSI + p)
            + (a3 + a4 / (PSI + p)) / t_th
            - w * q
            + born * w_p
        )
        heat_capacity = (
            c1
            + c2 / t_th**2
            - 2.0 * t / t_th**3 * solvation
            + w * t * x
            + 2.0 * t * y * w_t
            - t * born * w_tt
        )
        entropy = (
            s0
            + c1 * math.log(t / tr)
            - c2 / THETA * (1.0 / t_th - 1.0 / tr_th + ln_t / THETA)
            + solvation / t_th**2
            + w * y
            - born * w_t
            - wref * Y_REFERENCE
        )
        enthalpy = (
            h0
            + c1 * (t - tr)
            - c2 * (1.0 / t_th - 1.0 / tr_th)
            + a1 * dp_ref
            + a2 * ln_p
            + (2.0 * t - THETA) / t_th**2 * solvation
            + w * born
            + w * t * y
            - t * born * w_t
            - wref * born_r
            - wref * tr * Y_REFERENCE
        )
        gibbs_energy = (
            g0
            - s0 * (t - tr)
            - c1 * (t * math.log(t / tr) - t + tr)
            + a1 * dp_ref
            + a2 * ln_p
            - c2 * ((1.0 / t_th - 1.0 / tr_th) * (THETA - t) / THETA - t / THETA**2 * ln_t)
            + solvation / t_th
            + w * born
            - wref * born_r
            + wref * Y_REFERENCE * (t - tr)
        )
        logger.debug(f"HKF {substance.symbol}: omega={w} at T={t} P={p}")

        volume *= CAL_TO_J
        gibbs_energy *= CAL_TO_J
        enthalpy *= CAL_TO_J
        return ThermoPropertiesSubstance(
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=entropy * CAL_TO_J,
            heat_capacity_cp=heat_capacity * CAL_TO_J,
            heat_capacity_cv=heat_capacity * CAL_TO_J,
            volume=volume,
            helmholtz_energy=gibbs_energy - p * volume,
            internal_energy=enthalpy - p * volume,
        )
