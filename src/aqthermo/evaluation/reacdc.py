"""Closure between substance and reaction properties."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aqthermo.constants import LN_TO_LG, R_GAS
from aqthermo.exceptions import ReactionNotDefined
from aqthermo.models import Substance
from aqthermo.properties import (
    SUBSTANCE_FIELDS,
    ThermoPropertiesReaction,
    ThermoPropertiesSubstance,
)

if TYPE_CHECKING:
    from aqthermo.evaluation.context import EvaluationContext

logger = logging.getLogger(__name__)


def from_reaction(
    temperature: float,
    pressure: float,
    substance: Substance,
    context: "EvaluationContext",
) -> ThermoPropertiesSubstance:
    """Properties of a substance defined through a reaction.

    The reaction properties are seeded into the result, the contribution of
    every other reactant (coefficient times its properties) is subtracted and
    the remainder is divided by the substance's own coefficient.
    """
    if not substance.reaction_symbol:
        raise ReactionNotDefined(substance.symbol)
    reaction = context.database.get_reaction(substance.reaction_symbol)
    own = reaction.reactants.get(substance.symbol, 0.0)
    if own == 0.0:
        raise ReactionNotDefined(
            substance.symbol,
            f"reaction `{reaction.symbol}` does not list it with a non-zero coefficient",
        )

    reaction_props = context.reaction_properties(temperature, pressure, reaction.symbol)
    props = ThermoPropertiesSubstance(
        **{name: getattr(reaction_props, name) for name in SUBSTANCE_FIELDS}
    )
    for symbol, coefficient in reaction.reactants.items():
        if symbol == substance.symbol:
            continue
        props = props - coefficient * context.substance_properties(temperature, pressure, symbol)
    logger.debug(f"substance {substance.symbol}: derived from reaction {reaction.symbol}")
    return props / own


def reaction_properties_from_reactants(
    temperature: float,
    pressure: float,
    symbol: str,
    context: "EvaluationContext",
) -> ThermoPropertiesReaction:
    """Sum of coefficient times substance properties over all reactants.

    The reaction's own correction models are bypassed; ln K and log K follow
    from dG = -RT ln K. Every field carries a status naming the reactants.
    """
    reaction = context.database.get_reaction(symbol)
    totals = dict.fromkeys(SUBSTANCE_FIELDS, 0.0)
    message = "Calculated from the reaction components: "
    for reactant, coefficient in reaction.reactants.items():
        props = context.substance_properties(temperature, pressure, reactant)
        for name in SUBSTANCE_FIELDS:
            totals[name] += coefficient * getattr(props, name)
        message += f"{reactant}; "

    ln_k = totals["gibbs_energy"] / (-R_GAS * temperature)
    return ThermoPropertiesReaction(
        **totals,
        ln_equilibrium_constant=ln_k,
        log_equilibrium_constant=ln_k * LN_TO_LG,
        status={name: message for name in ThermoPropertiesReaction.scalar_fields()},
    )
