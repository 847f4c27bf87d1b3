"""Reaction properties from the reaction's own correction models."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aqthermo.eos.registry import REACTION_P, REACTION_T
from aqthermo.properties import ThermoPropertiesReaction

if TYPE_CHECKING:
    from aqthermo.evaluation.context import EvaluationContext

logger = logging.getLogger(__name__)


def reaction_properties(
    temperature: float, pressure: float, symbol: str, context: "EvaluationContext"
) -> ThermoPropertiesReaction:
    """Apply the temperature model, then the pressure model, of reaction ``symbol``.

    A temperature model that already carries the pressure dependence (the
    modified Ryzhenko-Bryzgalin model) is final: the pressure code is not
    applied on top of it.

    Raises:
        RecordNotFound: if the reaction is missing.
        UnsupportedMethod: if either method code has no model.
    """
    reaction = context.database.get_reaction(symbol)
    props = ThermoPropertiesReaction()

    t_model = context.registry.lookup(REACTION_T, reaction.method_t, "reaction", symbol)
    if t_model is not None:
        props = t_model(reaction).evaluate(temperature, pressure, props, context)
        if t_model.includes_pressure:
            logger.debug(f"reaction {symbol}: {reaction.method_t.name} skips the pressure correction")
            return props

    p_model = context.registry.lookup(REACTION_P, reaction.method_p, "reaction", symbol)
    if p_model is not None:
        props = p_model(reaction).evaluate(temperature, pressure, props, context)
    return props
