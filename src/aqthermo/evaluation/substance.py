"""Standard molar properties of substances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aqthermo.conventions import BERMAN_BROWN, STEAM_TABLES, to_berman_brown, to_steam_tables
from aqthermo.eos.registry import GEN_EOS, P_CORRECTION, T_CORRECTION, WATER
from aqthermo.exceptions import UnsupportedMethod
from aqthermo.models import MethodGenEoS
from aqthermo.preferences import ThermoPreferences, resolve
from aqthermo.properties import ThermoPropertiesSubstance

if TYPE_CHECKING:
    from aqthermo.evaluation.context import EvaluationContext

logger = logging.getLogger(__name__)


def substance_properties(
    temperature: float, pressure: float, symbol: str, context: "EvaluationContext"
) -> ThermoPropertiesSubstance:
    """Evaluate ``symbol`` at (T, P) by the models its method codes select.

    Raises:
        RecordNotFound: if ``symbol`` or a record it depends on is missing.
        UnsupportedMethod: if a method code has no model on the required axis.
        ReactionNotDefined: for a reaction-derived substance without a usable reaction.
    """
    pref = resolve(context.database, symbol)
    if pref.is_hydrogen:
        return ThermoPropertiesSubstance()

    if pref.is_reaction_derived:
        # imported here, reacdc calls back into this module through the context
        from aqthermo.evaluation.reacdc import from_reaction

        return from_reaction(temperature, pressure, pref.substance, context)

    if pref.is_water:
        props = _water_properties(temperature, pressure, pref, context)
    else:
        props = _solute_properties(temperature, pressure, pref, context)

    if pref.is_h2o_solvent:
        if context.conventions.water == STEAM_TABLES:
            props = to_steam_tables(props)
    elif context.conventions.aqueous == BERMAN_BROWN:
        props = to_berman_brown(
            props, pref.substance.formula, pref.substance.reference_t, pref.substance.symbol
        )
    return props


def _solute_properties(
    temperature: float,
    pressure: float,
    pref: ThermoPreferences,
    context: "EvaluationContext",
) -> ThermoPropertiesSubstance:
    substance = pref.substance
    registry = context.registry

    gen_eos = registry.lookup(GEN_EOS, pref.method_gen_eos, "substance", substance.symbol)
    if gen_eos is None:
        raise UnsupportedMethod("substance", substance.symbol, GEN_EOS, pref.method_gen_eos)
    props = gen_eos(substance).evaluate(temperature, pressure, ThermoPropertiesSubstance(), context)

    t_model = registry.lookup(T_CORRECTION, pref.method_t, "substance", substance.symbol)
    if t_model is not None:
        props = t_model(substance).evaluate(temperature, pressure, props, context)

    p_model = registry.lookup(P_CORRECTION, pref.method_p, "substance", substance.symbol)
    if p_model is not None:
        props = p_model(substance).evaluate(temperature, pressure, props, context)
    return props


def _water_properties(
    temperature: float,
    pressure: float,
    pref: ThermoPreferences,
    context: "EvaluationContext",
) -> ThermoPropertiesSubstance:
    substance = pref.substance
    registry = context.registry
    if registry.supports(WATER, pref.method_t):
        model = registry.lookup(WATER, pref.method_t, "substance", substance.symbol)
        return model(substance).substance_properties(temperature, pressure, pref.solvent_state)

    if pref.method_gen_eos is MethodGenEoS.CTPM_CPT:
        logger.debug(f"substance {substance.symbol}: no water model, using Cp integration")
        model = registry.lookup(GEN_EOS, MethodGenEoS.CTPM_CPT, "substance", substance.symbol)
        return model(substance).evaluate(
            temperature, pressure, ThermoPropertiesSubstance(), context
        )
    raise UnsupportedMethod("substance", substance.symbol, WATER, pref.method_t)
