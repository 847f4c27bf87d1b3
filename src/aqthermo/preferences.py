"""Classification of substance records that drives model dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from aqthermo.database import Database
from aqthermo.models import (
    AggregateState,
    MethodCorrP,
    MethodCorrT,
    MethodGenEoS,
    Substance,
    SubstanceClass,
    ThermoCalculationType,
)

HYDROGEN_ION = "H+"


@dataclass(frozen=True)
class ThermoPreferences:
    substance: Substance
    method_gen_eos: Optional[MethodGenEoS]
    method_t: Optional[MethodCorrT]
    method_p: Optional[MethodCorrP]
    solvent_state: AggregateState
    is_hydrogen: bool
    is_h2o_vapor: bool
    is_h2o_solvent: bool
    is_reaction_derived: bool

    @property
    def is_water(self) -> bool:
        return self.is_h2o_solvent or self.is_h2o_vapor


def preferences_for(substance: Substance) -> ThermoPreferences:
    """Derive the preferences of ``substance``; a pure function of the record."""
    is_h2o_vapor = (
        substance.method_gen_eos is MethodGenEoS.CTPM_HKF
        and substance.method_p is MethodCorrP.CPM_GAS
    )
    return ThermoPreferences(
        substance=substance,
        method_gen_eos=substance.method_gen_eos,
        method_t=substance.method_t,
        method_p=substance.method_p,
        solvent_state=(
            AggregateState.GAS
            if substance.aggregate_state is AggregateState.GAS
            else AggregateState.LIQUID
        ),
        is_hydrogen=substance.symbol == HYDROGEN_ION,
        is_h2o_vapor=is_h2o_vapor,
        is_h2o_solvent=substance.substance_class is SubstanceClass.AQSOLVENT,
        is_reaction_derived=substance.calculation_type is ThermoCalculationType.REACDC,
    )


def resolve(database: Database, symbol: str) -> ThermoPreferences:
    """Look up ``symbol`` and classify it.

    Raises:
        RecordNotFound: if the symbol is not a substance in ``database``.
    """
    return preferences_for(database.get_substance(symbol))
