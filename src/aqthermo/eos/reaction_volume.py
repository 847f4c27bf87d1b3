"""Pressure correction of reaction properties from the reaction volume."""

from __future__ import annotations

from dataclasses import replace

from numpy.polynomial import polynomial

from aqthermo.constants import LN_TO_LG, R_GAS
from aqthermo.eos.base import ReactionModel
from aqthermo.eos.registry import REACTION_P, register
from aqthermo.models import MethodCorrP


@register(REACTION_P, MethodCorrP.CPM_VKE, MethodCorrP.CPM_VBE)
class ReactionVolumeFunction(ReactionModel):
    """Adds the integral of dV(T) dP from Pr to P to the temperature result.

    dV(T) = c0 + c1 T + c2 T^2 + ... from ``volume_coefficients``; without
    coefficients the reference reaction volume is used as a constant.
    """

    def evaluate(self, temperature, pressure, props, context):
        coefficients = self.reaction.volume_coefficients or (self.reaction.reference.volume,)
        t = temperature
        dp = pressure - self.reaction.reference_p
        volume = float(polynomial.polyval(t, coefficients))
        volume_t = float(polynomial.polyval(t, polynomial.polyder(coefficients)))
        volume_tt = float(polynomial.polyval(t, polynomial.polyder(coefficients, 2)))

        gibbs_energy = props.gibbs_energy + volume * dp
        enthalpy = props.enthalpy + (volume - t * volume_t) * dp
        heat_capacity = props.heat_capacity_cp - t * volume_tt * dp
        ln_k = -gibbs_energy / (R_GAS * t)
        return replace(
            props,
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=props.entropy - volume_t * dp,
            heat_capacity_cp=heat_capacity,
            heat_capacity_cv=heat_capacity,
            volume=volume,
            helmholtz_energy=gibbs_energy - pressure * volume,
            internal_energy=enthalpy - pressure * volume,
            ln_equilibrium_constant=ln_k,
            log_equilibrium_constant=ln_k * LN_TO_LG,
        )
