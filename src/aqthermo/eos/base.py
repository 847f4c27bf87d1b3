"""Base interfaces for the property models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, TypeVar

from aqthermo.models import AggregateState, Reaction, Substance
from aqthermo.properties import (
    ElectroPropertiesSolvent,
    PropertiesSolvent,
    ThermoPropertiesReaction,
    ThermoPropertiesSubstance,
)

if TYPE_CHECKING:
    from aqthermo.evaluation.context import EvaluationContext

_B = TypeVar("_B")


class SubstanceModel(ABC):
    """A generic EoS or a temperature/pressure correction of a substance.

    Generic EoS models build the baseline from the record and ignore
    ``props``; correction models return a refined copy of ``props``.
    """

    def __init__(self, substance: Substance):
        self.substance = substance

    @abstractmethod
    def evaluate(
        self,
        temperature: float,
        pressure: float,
        props: ThermoPropertiesSubstance,
        context: "EvaluationContext",
    ) -> ThermoPropertiesSubstance:
        pass

    def require(self, block: Optional[_B], name: str) -> _B:
        """Return a parameter block of the record or raise ``ValueError``."""
        if block is None:
            raise ValueError(
                f"{type(self).__name__} needs `{name}` parameters for substance "
                f"`{self.substance.symbol}`"
            )
        return block


class WaterModel(ABC):
    """Equation of state of water, for the solvent and for water vapor."""

    def __init__(self, substance: Substance):
        self.substance = substance

    @abstractmethod
    def substance_properties(
        self, temperature: float, pressure: float, state: AggregateState
    ) -> ThermoPropertiesSubstance:
        """Standard molar properties on the Helgeson and Kirkham (1974) scale."""
        pass

    @abstractmethod
    def solvent_properties(
        self, temperature: float, pressure: float, state: AggregateState
    ) -> PropertiesSolvent:
        """Density and its derivatives."""
        pass


class DielectricModel(ABC):
    """Dielectric constant of the solvent and the derived Born functions."""

    @abstractmethod
    def electro_properties(self, solvent: PropertiesSolvent) -> ElectroPropertiesSolvent:
        pass


class ReactionModel(ABC):
    """A temperature or pressure correction of a reaction's properties."""

    # temperature models whose result already carries the pressure dependence
    includes_pressure = False

    def __init__(self, reaction: Reaction):
        self.reaction = reaction

    @abstractmethod
    def evaluate(
        self,
        temperature: float,
        pressure: float,
        props: ThermoPropertiesReaction,
        context: "EvaluationContext",
    ) -> ThermoPropertiesReaction:
        pass


class PressureIntegralModel(SubstanceModel):
    """A pressure correction defined by the Gibbs energy increment from Pr to P.

    Subclasses provide ``gibbs_increment(T, P)``; entropy, enthalpy and heat
    capacity increments follow from its temperature derivatives and the
    molar volume from its pressure derivative, both by central differences.
    """

    step_t = 0.01  # K

    @abstractmethod
    def gibbs_increment(self, temperature: float, pressure: float) -> float:
        pass

    def volume(self, temperature: float, pressure: float) -> float:
        step = max(1.0e-3 * pressure, 1.0e-3)
        return (
            self.gibbs_increment(temperature, pressure + step)
            - self.gibbs_increment(temperature, pressure - step)
        ) / (2.0 * step)

    def evaluate(self, temperature, pressure, props, context):
        h = self.step_t
        g = self.gibbs_increment(temperature, pressure)
        g_up = self.gibbs_increment(temperature + h, pressure)
        g_down = self.gibbs_increment(temperature - h, pressure)
        entropy = -(g_up - g_down) / (2.0 * h)
        heat_capacity = -temperature * (g_up - 2.0 * g + g_down) / h**2
        enthalpy = g + temperature * entropy
        volume = self.volume(temperature, pressure)

        gibbs_energy = props.gibbs_energy + g
        enthalpy = props.enthalpy + enthalpy
        return ThermoPropertiesSubstance(
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=props.entropy + entropy,
            heat_capacity_cp=props.heat_capacity_cp + heat_capacity,
            heat_capacity_cv=props.heat_capacity_cv + heat_capacity,
            volume=volume,
            helmholtz_energy=gibbs_energy - pressure * volume,
            internal_energy=enthalpy - pressure * volume,
        )
