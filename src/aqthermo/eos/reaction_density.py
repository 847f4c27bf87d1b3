"""Density models of reaction equilibrium constants.

Both models need the solvent density at (T, P) and so are evaluated through
the context's memoized solvent entry point.
"""

from __future__ import annotations

import logging
import math

from aqthermo.constants import LG_TO_LN, R_GAS
from aqthermo.eos.base import ReactionModel
from aqthermo.eos.reaction_logk import properties_from_log_k
from aqthermo.eos.registry import REACTION_T, register
from aqthermo.models import DensityModelParameters, MethodCorrT
from aqthermo.properties import PropertiesSolvent, ThermoPropertiesReaction

logger = logging.getLogger(__name__)


def density_log_k(
    temperature: float,
    pressure: float,
    params: DensityModelParameters,
    water: PropertiesSolvent,
) -> ThermoPropertiesReaction:
    """log K = A + B/T + C/T^2 + D/T^3 + (E + F/T + G/T^2) log10(rho)

    Temperature derivatives are taken along the isobar, so the density
    derivatives of the solvent enter through the chain rule.
    """
    t = temperature
    rho = water.density_g_cm3
    # the ratios are unit-free, kg/m³ can stay
    r_t = water.density_t / water.density
    r_p = water.density_p / water.density
    r_tt = water.density_tt / water.density

    log_rho = math.log10(rho)
    log_rho_t = r_t / LG_TO_LN
    log_rho_tt = (r_tt - r_t**2) / LG_TO_LN
    log_rho_p = r_p / LG_TO_LN

    f = params.a + params.b / t + params.c / t**2 + params.d / t**3
    f_t = -params.b / t**2 - 2.0 * params.c / t**3 - 3.0 * params.d / t**4
    f_tt = 2.0 * params.b / t**3 + 6.0 * params.c / t**4 + 12.0 * params.d / t**5
    h = params.e + params.f / t + params.g / t**2
    h_t = -params.f / t**2 - 2.0 * params.g / t**3
    h_tt = 2.0 * params.f / t**3 + 6.0 * params.g / t**4

    log_k = f + h * log_rho
    dlogk = f_t + h_t * log_rho + h * log_rho_t
    d2logk = f_tt + h_tt * log_rho + 2.0 * h_t * log_rho_t + h * log_rho_tt
    volume = -R_GAS * t * LG_TO_LN * h * log_rho_p
    return properties_from_log_k(t, pressure, log_k, dlogk, d2logk, volume)


@register(REACTION_T, MethodCorrT.CTM_DKR)
class ReactionFrantzMarshall(ReactionModel):
    """Marshall and Franck (1981) density model."""

    def evaluate(self, temperature, pressure, props, context):
        params = self.reaction.density_model
        if params is None:
            raise ValueError(
                f"Reaction `{self.reaction.symbol}` has no density model coefficients"
            )
        water = context.solvent_properties(temperature, pressure, context.solvent_symbol)
        return density_log_k(temperature, pressure, params, water)


@register(REACTION_T, MethodCorrT.CTM_MRB)
class ReactionRyzhenkoBryzgalin(ReactionModel):
    """Modified Ryzhenko-Bryzgalin model.

    log K(T, P) = (Tr/T) log K0 + zz/a [B(T, P) - (Tr/T) B(Tr, Pr)]
    B(T, P) = a + b log10(rho)

    The non-electrostatic part scales with Tr/T and the electrostatic part
    follows the solvent density, so the model is a special case of the
    density model and is evaluated by it.
    """

    includes_pressure = True

    def evaluate(self, temperature, pressure, props, context):
        params = self.reaction.ryzhenko_bryzgalin
        if params is None:
            raise ValueError(
                f"Reaction `{self.reaction.symbol}` has no Ryzhenko-Bryzgalin parameters"
            )
        tr, pr = self.reaction.reference_t, self.reaction.reference_p
        solvent = context.solvent_symbol
        water = context.solvent_properties(temperature, pressure, solvent)
        water_r = context.solvent_properties(tr, pr, solvent)

        b_r = params.a + params.b * math.log10(water_r.density_g_cm3)
        zeta = params.zz_over_a
        density_model = DensityModelParameters(
            a=zeta * params.a,
            b=tr * (self.reaction.reference.log_k - zeta * b_r),
            e=zeta * params.b,
        )
        logger.debug(f"MRB {self.reaction.symbol}: B(Tr, Pr)={b_r}")
        return density_log_k(temperature, pressure, density_model, water)


@register(REACTION_T, MethodCorrT.CTM_IKZ)
class ReactionDensityInterpolation(ReactionModel):
    """Interpolation of log K over density; accepted but not computed."""

    def evaluate(self, temperature, pressure, props, context):
        logger.warning(
            f"Reaction `{self.reaction.symbol}`: density interpolation is not implemented, "
            f"properties are left unchanged"
        )
        return props.with_status("log_equilibrium_constant", "density interpolation not implemented")
