"""Akinfiev and Diamond (2003) equation of state for aqueous non-electrolytes.

The hydration function Phi links the aqueous solute to the ideal gas:

    G_aq(T, P) = G_ig(T) + Phi(T, P)
    Phi = -RT ln Nw + (1 - xi) RT ln f_w + xi RT ln(R' T rho_w / Mw)
          + RT rho_w (a + b (1000 / T)^0.5)

with RT ln f_w = G_w(T, P) - G_w,ig(T). The baseline properties are those of
the record's Cp integration, so the reference-state value of Phi is removed
before the value at (T, P) is added.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from aqthermo.constants import H2O_MOLAR_MASS, R_CM3_BAR, R_GAS
from aqthermo.eos.base import SubstanceModel
from aqthermo.eos.registry import P_CORRECTION, register
from aqthermo.eos.water_ideal_gas import water_ideal_gas
from aqthermo.models import MethodCorrP
from aqthermo.properties import ThermoPropertiesSubstance

logger = logging.getLogger(__name__)

WATER_MOLALITY = 1000.0 / H2O_MOLAR_MASS


@dataclass(frozen=True)
class _Hydration:
    gibbs_energy: float
    entropy: float
    heat_capacity: float
    volume: float


@register(P_CORRECTION, MethodCorrP.CPM_AKI)
class AkinfievDiamond(SubstanceModel):
    def hydration(self, temperature: float, pressure: float, context) -> _Hydration:
        params = self.require(self.substance.akinfiev_diamond, "akinfiev_diamond")
        xi, a, b = params.xi, params.a, params.b
        t = temperature
        solvent = context.solvent_symbol
        water = context.substance_properties(t, pressure, solvent)
        bulk = context.solvent_properties(t, pressure, solvent)
        ideal = water_ideal_gas(t)

        rho = bulk.density_g_cm3
        rho_t = bulk.density_t / 1000.0
        rho_p = bulk.density_p / 1000.0
        rho_tt = bulk.density_tt / 1000.0
        root = math.sqrt(1000.0 / t)
        k = a + b * root
        k_t = -0.5 * b * root / t
        k_tt = 0.75 * b * root / t**2

        gibbs_energy = (
            -R_GAS * t * math.log(WATER_MOLALITY)
            + (1.0 - xi) * (water.gibbs_energy - ideal.gibbs_energy)
            + xi * R_GAS * t * math.log(R_CM3_BAR * t * rho / H2O_MOLAR_MASS)
            + R_GAS * t * rho * k
        )
        d_t = (
            -R_GAS * math.log(WATER_MOLALITY)
            + (1.0 - xi) * (ideal.entropy - water.entropy)
            + xi * R_GAS * (math.log(R_CM3_BAR * t * rho / H2O_MOLAR_MASS) + 1.0 + t * rho_t / rho)
            + R_GAS * (rho * k + t * rho_t * k + t * rho * k_t)
        )
        d_tt = (
            (1.0 - xi) * (ideal.heat_capacity_cp - water.heat_capacity_cp) / t
            + xi * R_GAS * (1.0 / t + 2.0 * rho_t / rho + t * (rho_tt / rho - (rho_t / rho) ** 2))
            + R_GAS
            * (
                2.0 * rho_t * k
                + 2.0 * rho * k_t
                + t * rho_tt * k
                + 2.0 * t * rho_t * k_t
                + t * rho * k_tt
            )
        )
        volume = (
            (1.0 - xi) * water.volume
            + xi * R_GAS * t * rho_p / rho
            + R_GAS * t * rho_p * k
        )
        return _Hydration(
            gibbs_energy=gibbs_energy,
            entropy=-d_t,
            heat_capacity=-t * d_tt,
            volume=volume,
        )

    def evaluate(self, temperature, pressure, props, context):
        # hydration terms vanish at the reference state of the solvent
        solvent = context.database.get_substance(context.solvent_symbol)
        tr, pr = solvent.reference_t, solvent.reference_p
        phi = self.hydration(temperature, pressure, context)
        phi_r = self.hydration(tr, pr, context)
        logger.debug(
            f"Akinfiev-Diamond {self.substance.symbol}: Phi={phi.gibbs_energy} Phi_r={phi_r.gibbs_energy}"
        )

        h_phi = phi.gibbs_energy + temperature * phi.entropy
        h_phi_r = phi_r.gibbs_energy + tr * phi_r.entropy
        gibbs_energy = (
            props.gibbs_energy
            - phi_r.gibbs_energy
            + phi_r.entropy * (temperature - tr)
            + phi.gibbs_energy
        )
        enthalpy = props.enthalpy - h_phi_r + h_phi
        volume = phi.volume
        return ThermoPropertiesSubstance(
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=props.entropy - phi_r.entropy + phi.entropy,
            heat_capacity_cp=props.heat_capacity_cp + phi.heat_capacity,
            heat_capacity_cv=props.heat_capacity_cv + phi.heat_capacity,
            volume=volume,
            helmholtz_energy=gibbs_energy - pressure * volume,
            internal_energy=enthalpy - pressure * volume,
        )
