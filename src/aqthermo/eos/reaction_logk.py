"""Temperature dependence of reaction equilibrium constants."""

from __future__ import annotations

import math

from aqthermo.constants import LG_TO_LN, R_GAS
from aqthermo.eos.base import ReactionModel
from aqthermo.eos.cp_integration import heat_capacity, integrate_cp
from aqthermo.eos.registry import REACTION_T, register
from aqthermo.models import CpInterval, MethodCorrT
from aqthermo.properties import ThermoPropertiesReaction


def properties_from_log_k(
    temperature: float,
    pressure: float,
    log_k: float,
    dlogk_dt: float,
    d2logk_dt2: float,
    volume: float,
) -> ThermoPropertiesReaction:
    """Reaction properties from log K and its first two temperature derivatives.

    dG = -RT ln10 log K, dH = R ln10 T^2 dlogK/dT, dS = (dH - dG) / T and
    dCp = R ln10 (2 T dlogK/dT + T^2 d2logK/dT2).
    """
    t = temperature
    rln10 = R_GAS * LG_TO_LN
    gibbs_energy = -rln10 * t * log_k
    enthalpy = rln10 * t**2 * dlogk_dt
    heat_capacity_cp = rln10 * (2.0 * t * dlogk_dt + t**2 * d2logk_dt2)
    return ThermoPropertiesReaction(
        gibbs_energy=gibbs_energy,
        enthalpy=enthalpy,
        entropy=(enthalpy - gibbs_energy) / t,
        heat_capacity_cp=heat_capacity_cp,
        heat_capacity_cv=heat_capacity_cp,
        volume=volume,
        helmholtz_energy=gibbs_energy - pressure * volume,
        internal_energy=enthalpy - pressure * volume,
        ln_equilibrium_constant=log_k * LG_TO_LN,
        log_equilibrium_constant=log_k,
    )


def properties_from_enthalpy(
    temperature: float,
    pressure: float,
    enthalpy: float,
    entropy: float,
    heat_capacity_cp: float,
    volume: float,
) -> ThermoPropertiesReaction:
    rln10 = R_GAS * LG_TO_LN
    t = temperature
    gibbs_energy = enthalpy - t * entropy
    return properties_from_log_k(
        t,
        pressure,
        log_k=-gibbs_energy / (rln10 * t),
        dlogk_dt=enthalpy / (rln10 * t**2),
        d2logk_dt2=(heat_capacity_cp / t**2 - 2.0 * enthalpy / t**3) / rln10,
        volume=volume,
    )


class _ReferenceLogK(ReactionModel):
    @property
    def reference_gibbs_energy(self) -> float:
        return -R_GAS * LG_TO_LN * self.reaction.reference_t * self.reaction.reference.log_k

    @property
    def reference_entropy(self) -> float:
        ref = self.reaction.reference
        return (ref.enthalpy - self.reference_gibbs_energy) / self.reaction.reference_t


@register(REACTION_T, MethodCorrT.CTM_LGK, MethodCorrT.CTM_LGX)
class LogKPolynomial(ReactionModel):
    """log K = A0 + A1 T + A2/T + A3 ln T + A4/T^2 + A5 T^2 + A6/T^0.5"""

    def evaluate(self, temperature, pressure, props, context):
        if not self.reaction.logk_coefficients:
            raise ValueError(
                f"Reaction `{self.reaction.symbol}` has no log K coefficients"
            )
        a = tuple(self.reaction.logk_coefficients) + (0.0,) * 7
        t = temperature
        log_k = (
            a[0] + a[1] * t + a[2] / t + a[3] * math.log(t)
            + a[4] / t**2 + a[5] * t**2 + a[6] / math.sqrt(t)
        )
        dlogk = (
            a[1] - a[2] / t**2 + a[3] / t - 2.0 * a[4] / t**3
            + 2.0 * a[5] * t - 0.5 * a[6] * t**-1.5
        )
        d2logk = (
            2.0 * a[2] / t**3 - a[3] / t**2 + 6.0 * a[4] / t**4
            + 2.0 * a[5] + 0.75 * a[6] * t**-2.5
        )
        return properties_from_log_k(
            t, pressure, log_k, dlogk, d2logk, self.reaction.reference.volume
        )


@register(REACTION_T, MethodCorrT.CTM_EK0)
class LogKConstantGibbs(_ReferenceLogK):
    """One-term extrapolation: zero reaction entropy, log K = log K0 Tr / T."""

    def evaluate(self, temperature, pressure, props, context):
        tr = self.reaction.reference_t
        log_k0 = self.reaction.reference.log_k
        t = temperature
        return properties_from_log_k(
            t,
            pressure,
            log_k0 * tr / t,
            -log_k0 * tr / t**2,
            2.0 * log_k0 * tr / t**3,
            self.reaction.reference.volume,
        )


@register(REACTION_T, MethodCorrT.CTM_EK1)
class LogKVantHoff(_ReferenceLogK):
    """Two-term extrapolation with a constant reaction enthalpy."""

    def evaluate(self, temperature, pressure, props, context):
        return properties_from_enthalpy(
            temperature,
            pressure,
            enthalpy=self.reaction.reference.enthalpy,
            entropy=self.reference_entropy,
            heat_capacity_cp=0.0,
            volume=self.reaction.reference.volume,
        )


@register(REACTION_T, MethodCorrT.CTM_EK2)
class LogKConstantHeatCapacity(_ReferenceLogK):
    def evaluate(self, temperature, pressure, props, context):
        ref = self.reaction.reference
        tr = self.reaction.reference_t
        dcp = ref.heat_capacity_cp
        return properties_from_enthalpy(
            temperature,
            pressure,
            enthalpy=ref.enthalpy + dcp * (temperature - tr),
            entropy=self.reference_entropy + dcp * math.log(temperature / tr),
            heat_capacity_cp=dcp,
            volume=ref.volume,
        )


@register(REACTION_T, MethodCorrT.CTM_EK3)
class LogKHeatCapacityFunction(_ReferenceLogK):
    """Reaction heat capacity as a Cp(T) polynomial of the reaction."""

    def evaluate(self, temperature, pressure, props, context):
        coefficients = self.reaction.dcp_coefficients
        if not coefficients:
            raise ValueError(
                f"Reaction `{self.reaction.symbol}` has no heat capacity coefficients"
            )
        interval = CpInterval(t_min=0.0, t_max=math.inf, coefficients=tuple(coefficients))
        dcp_integral, dcp_t_integral = integrate_cp(
            [interval], self.reaction.reference_t, temperature
        )
        return properties_from_enthalpy(
            temperature,
            pressure,
            enthalpy=self.reaction.reference.enthalpy + dcp_integral,
            entropy=self.reference_entropy + dcp_t_integral,
            heat_capacity_cp=heat_capacity(coefficients, temperature),
            volume=self.reaction.reference.volume,
        )
