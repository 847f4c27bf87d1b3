"""Bulk and dielectric properties of the solvent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from aqthermo.eos.registry import DIELECTRIC, WATER
from aqthermo.preferences import resolve
from aqthermo.properties import ElectroPropertiesSolvent, PropertiesSolvent

if TYPE_CHECKING:
    from aqthermo.evaluation.context import EvaluationContext


def solvent_properties(
    temperature: float, pressure: float, symbol: str, context: "EvaluationContext"
) -> PropertiesSolvent:
    """Density and its derivatives from the water model selected by the T code.

    Non-solvent symbols get the zero-valued result.
    """
    pref = resolve(context.database, symbol)
    if not pref.is_h2o_solvent:
        return PropertiesSolvent()
    model = context.registry.lookup(WATER, pref.method_t, "solvent", symbol)
    return model(pref.substance).solvent_properties(temperature, pressure, pref.solvent_state)


def electro_solvent_properties(
    temperature: float, pressure: float, symbol: str, context: "EvaluationContext"
) -> ElectroPropertiesSolvent:
    """Dielectric constant and Born functions from the model selected by the genEoS code."""
    pref = resolve(context.database, symbol)
    if not pref.is_h2o_solvent:
        return ElectroPropertiesSolvent()
    model = context.registry.lookup(DIELECTRIC, pref.method_gen_eos, "solvent", symbol)
    bulk = context.solvent_properties(temperature, pressure, symbol)
    return model().electro_properties(bulk)
