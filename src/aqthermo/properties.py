"""Property result value objects.

Every result is a frozen dataclass of floats. Results are produced fresh by
the evaluators and never mutated; derived results are built with the
arithmetic operators or ``dataclasses.replace``. An optional ``status``
mapping annotates individual fields with a provenance message.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Mapping, Tuple, TypeVar

_P = TypeVar("_P", bound="_ScalarProperties")


@dataclass(frozen=True)
class _ScalarProperties:
    status: Mapping[str, str] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def scalar_fields(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if f.name != "status")

    def values(self) -> dict:
        return {name: getattr(self, name) for name in self.scalar_fields()}

    def with_status(self: _P, name: str, message: str) -> _P:
        status = dict(self.status)
        status[name] = message
        return replace(self, status=status)

    def __add__(self: _P, other: _P) -> _P:
        if type(other) is not type(self):
            return NotImplemented
        return replace(
            self,
            **{n: getattr(self, n) + getattr(other, n) for n in self.scalar_fields()},
        )

    def __sub__(self: _P, other: _P) -> _P:
        if type(other) is not type(self):
            return NotImplemented
        return replace(
            self,
            **{n: getattr(self, n) - getattr(other, n) for n in self.scalar_fields()},
        )

    def __mul__(self: _P, factor: float) -> _P:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return replace(self, **{n: getattr(self, n) * factor for n in self.scalar_fields()})

    __rmul__ = __mul__

    def __truediv__(self: _P, divisor: float) -> _P:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return replace(self, **{n: getattr(self, n) / divisor for n in self.scalar_fields()})


@dataclass(frozen=True)
class ThermoPropertiesSubstance(_ScalarProperties):
    """Standard molar properties of a substance (J, mol, K, bar)."""

    gibbs_energy: float = 0.0
    enthalpy: float = 0.0
    entropy: float = 0.0
    heat_capacity_cp: float = 0.0
    heat_capacity_cv: float = 0.0
    volume: float = 0.0
    helmholtz_energy: float = 0.0
    internal_energy: float = 0.0


@dataclass(frozen=True)
class ThermoPropertiesReaction(_ScalarProperties):
    """Standard molar properties of a reaction."""

    gibbs_energy: float = 0.0
    enthalpy: float = 0.0
    entropy: float = 0.0
    heat_capacity_cp: float = 0.0
    heat_capacity_cv: float = 0.0
    volume: float = 0.0
    helmholtz_energy: float = 0.0
    internal_energy: float = 0.0
    ln_equilibrium_constant: float = 0.0
    log_equilibrium_constant: float = 0.0


SUBSTANCE_FIELDS = ThermoPropertiesSubstance.scalar_fields()


@dataclass(frozen=True)
class PropertiesSolvent(_ScalarProperties):
    """Bulk properties of the solvent.

    Density in kg/m³; ``density_t`` etc. are its partial derivatives in K and
    bar. ``alpha`` is the isobaric expansivity (1/K), ``beta`` the isothermal
    compressibility (1/bar) and ``alpha_t`` the temperature derivative of alpha.
    """

    temperature: float = 0.0
    pressure: float = 0.0
    density: float = 0.0
    density_t: float = 0.0
    density_p: float = 0.0
    density_tt: float = 0.0
    density_tp: float = 0.0
    density_pp: float = 0.0
    alpha: float = 0.0
    beta: float = 0.0
    alpha_t: float = 0.0

    @property
    def density_g_cm3(self) -> float:
        return self.density / 1000.0


@dataclass(frozen=True)
class ElectroPropertiesSolvent(_ScalarProperties):
    """Dielectric constant of the solvent, its derivatives and the Born functions."""

    epsilon: float = 0.0
    epsilon_t: float = 0.0
    epsilon_p: float = 0.0
    epsilon_tt: float = 0.0
    epsilon_tp: float = 0.0
    epsilon_pp: float = 0.0
    born_z: float = 0.0
    born_y: float = 0.0
    born_q: float = 0.0
    born_x: float = 0.0
    born_u: float = 0.0
    born_n: float = 0.0
