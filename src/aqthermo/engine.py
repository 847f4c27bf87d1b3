"""Public entry point: the thermodynamic property evaluator."""

from __future__ import annotations

import logging
from typing import Dict

from aqthermo.conventions import Conventions
from aqthermo.database import Database
from aqthermo.eos import ModelRegistry
from aqthermo.evaluation.context import DEFAULT_SOLVENT, EvaluationContext
from aqthermo.evaluation.reacdc import reaction_properties_from_reactants
from aqthermo.formula import parse_formula
from aqthermo.memo import memoize
from aqthermo.properties import (
    ElectroPropertiesSolvent,
    PropertiesSolvent,
    ThermoPropertiesReaction,
    ThermoPropertiesSubstance,
)

logger = logging.getLogger(__name__)


class ThermoEvaluator:
    """Computes standard properties of substances, the solvent and reactions.

    Temperatures are in K, pressures in bar (``0`` means the saturation curve
    for water models). Results are memoized per ``(T, P, symbol)`` for the
    lifetime of the evaluator; changing the solvent clears every cache.
    """

    def __init__(
        self,
        database: Database,
        conventions: Conventions | None = None,
        solvent_symbol: str = DEFAULT_SOLVENT,
        registry: ModelRegistry | None = None,
    ) -> None:
        self.database = database
        self._context = EvaluationContext(
            database,
            conventions=conventions,
            solvent_symbol=solvent_symbol,
            registry=registry,
        )
        self._from_reactants = memoize(
            lambda t, p, symbol: reaction_properties_from_reactants(t, p, symbol, self._context)
        )

    @property
    def conventions(self) -> Conventions:
        return self._context.conventions

    def substance_properties(
        self, temperature: float, pressure: float, symbol: str
    ) -> ThermoPropertiesSubstance:
        return self._context.substance_properties(temperature, pressure, symbol)

    def electro_solvent_properties(
        self, temperature: float, pressure: float, symbol: str | None = None
    ) -> ElectroPropertiesSolvent:
        return self._context.electro_solvent_properties(
            temperature, pressure, symbol or self.solvent_symbol
        )

    def solvent_properties(
        self, temperature: float, pressure: float, symbol: str | None = None
    ) -> PropertiesSolvent:
        return self._context.solvent_properties(
            temperature, pressure, symbol or self.solvent_symbol
        )

    def reaction_properties(
        self, temperature: float, pressure: float, symbol: str
    ) -> ThermoPropertiesReaction:
        return self._context.reaction_properties(temperature, pressure, symbol)

    def reaction_properties_from_reactants(
        self, temperature: float, pressure: float, symbol: str
    ) -> ThermoPropertiesReaction:
        return self._from_reactants(temperature, pressure, symbol)

    @property
    def solvent_symbol(self) -> str:
        return self._context.solvent_symbol

    def set_solvent_symbol(self, symbol: str) -> None:
        if symbol != self._context.solvent_symbol:
            self._context.solvent_symbol = symbol
            self._from_reactants.cache_clear()

    def parse_substance_formula(self, formula: str) -> Dict[str, float]:
        return parse_formula(formula)

    def cache_info(self) -> dict:
        info = self._context.cache_info()
        info["reaction_from_reactants"] = self._from_reactants.cache_info()
        return info

    def cache_clear(self) -> None:
        self._context.cache_clear()
        self._from_reactants.cache_clear()
