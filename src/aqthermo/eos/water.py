"""Equations of state of water backed by CoolProp.

Results are converted from the IAPWS reference state (zero internal energy
and entropy of liquid water at the triple point) to the apparent properties
of formation of Helgeson and Kirkham (1974).
"""

from __future__ import annotations

import logging
from typing import Tuple

from CoolProp.CoolProp import PropsSI

from aqthermo.constants import (
    A_TRIPLE,
    BAR_TO_PA,
    G_TRIPLE,
    H2O_MOLAR_MASS,
    H_TRIPLE,
    M3_TO_J_PER_BAR,
    S_TRIPLE,
    T_TRIPLE,
    U_TRIPLE,
)
from aqthermo.eos.base import WaterModel
from aqthermo.eos.registry import WATER, register
from aqthermo.exceptions import PhaseNotAvailable
from aqthermo.models import AggregateState, MethodCorrT
from aqthermo.properties import PropertiesSolvent, ThermoPropertiesSubstance

logger = logging.getLogger(__name__)

MOLAR_MASS = H2O_MOLAR_MASS / 1000.0  # kg/mol

# offset from the saturation pressure that keeps a state on the requested branch
_SATURATION_OFFSET = 1.0e-3
_STEP_T = 0.01  # K

T_CRITICAL = 647.096  # K
P_CRITICAL = 220.64e5  # Pa


class CoolPropWater(WaterModel):
    fluid = "HEOS::Water"
    # whether the backend honours a phase imposed on the pressure input
    impose_phase = True

    def _pressure(self, temperature: float, pressure: float, state: AggregateState) -> Tuple[float, bool]:
        """Return the pressure in Pa and whether it was taken from the saturation curve."""
        if pressure > 0.0:
            return pressure * BAR_TO_PA, False
        quality = 1 if state is AggregateState.GAS else 0
        saturation = PropsSI("P", "T", temperature, "Q", quality, self.fluid)
        if state is AggregateState.GAS:
            return saturation * (1.0 - _SATURATION_OFFSET), True
        return saturation * (1.0 + _SATURATION_OFFSET), True

    def _pressure_key(self, temperature: float, pressure_pa: float, state: AggregateState) -> str:
        """PropsSI input key for the pressure that keeps the evaluation on the requested branch.

        Above the critical temperature or pressure there is a single fluid phase
        and the plain key is used. Below it the phase is imposed where the backend
        supports that; otherwise a state on the other side of the saturation curve
        raises :class:`PhaseNotAvailable`.
        """
        if temperature >= T_CRITICAL or pressure_pa >= P_CRITICAL:
            return "P"
        if self.impose_phase:
            return "P|gas" if state is AggregateState.GAS else "P|liquid"
        boiling = PropsSI("T", "P", pressure_pa, "Q", 0, self.fluid)
        if (temperature > boiling) != (state is AggregateState.GAS):
            raise PhaseNotAvailable(
                self.substance.symbol, temperature, pressure_pa / BAR_TO_PA, state
            )
        return "P"

    def _props(self, key: str, temperature: float, pressure_pa: float, state: AggregateState) -> float:
        pressure_key = self._pressure_key(temperature, pressure_pa, state)
        try:
            return PropsSI(key, "T", temperature, pressure_key, pressure_pa, self.fluid)
        except ValueError as error:
            if pressure_key == "P":
                raise
            # beyond the metastable limit of the imposed phase
            raise PhaseNotAvailable(
                self.substance.symbol, temperature, pressure_pa / BAR_TO_PA, state
            ) from error

    def _density(self, temperature: float, pressure_pa: float, state: AggregateState) -> float:
        return self._props("D", temperature, pressure_pa, state)

    def substance_properties(self, temperature, pressure, state):
        p, _ = self._pressure(temperature, pressure, state)
        values = {
            key: self._props(key, temperature, p, state)
            for key in ("D", "H", "S", "U", "C", "O")
        }
        enthalpy = values["H"] * MOLAR_MASS
        entropy = values["S"] * MOLAR_MASS
        internal_energy = values["U"] * MOLAR_MASS
        shift = S_TRIPLE * (temperature - T_TRIPLE)
        logger.debug(f"{self.fluid} T={temperature} P={p} Pa: rho={values['D']}")
        return ThermoPropertiesSubstance(
            gibbs_energy=enthalpy - temperature * entropy + G_TRIPLE - shift,
            enthalpy=enthalpy + H_TRIPLE,
            entropy=entropy + S_TRIPLE,
            heat_capacity_cp=values["C"] * MOLAR_MASS,
            heat_capacity_cv=values["O"] * MOLAR_MASS,
            volume=MOLAR_MASS / values["D"] * M3_TO_J_PER_BAR,
            helmholtz_energy=internal_energy - temperature * entropy + A_TRIPLE - shift,
            internal_energy=internal_energy + U_TRIPLE,
        )

    def solvent_properties(self, temperature, pressure, state):
        p, saturated = self._pressure(temperature, pressure, state)
        h_t = _STEP_T
        h_p = p * (1.0e-4 if saturated else 1.0e-3)

        rho = self._density(temperature, p, state)
        rho_t_up = self._density(temperature + h_t, p, state)
        rho_t_down = self._density(temperature - h_t, p, state)
        rho_p_up = self._density(temperature, p + h_p, state)
        rho_p_down = self._density(temperature, p - h_p, state)
        rho_tp = (
            self._density(temperature + h_t, p + h_p, state)
            - self._density(temperature + h_t, p - h_p, state)
            - self._density(temperature - h_t, p + h_p, state)
            + self._density(temperature - h_t, p - h_p, state)
        ) / (4.0 * h_t * h_p)

        rho_t = (rho_t_up - rho_t_down) / (2.0 * h_t)
        rho_tt = (rho_t_up - 2.0 * rho + rho_t_down) / h_t**2
        rho_p = (rho_p_up - rho_p_down) / (2.0 * h_p)
        rho_pp = (rho_p_up - 2.0 * rho + rho_p_down) / h_p**2

        # per bar
        rho_p *= BAR_TO_PA
        rho_pp *= BAR_TO_PA**2
        rho_tp *= BAR_TO_PA
        return PropertiesSolvent(
            temperature=temperature,
            pressure=p / BAR_TO_PA,
            density=rho,
            density_t=rho_t,
            density_p=rho_p,
            density_tt=rho_tt,
            density_tp=rho_tp,
            density_pp=rho_pp,
            alpha=-rho_t / rho,
            beta=rho_p / rho,
            alpha_t=-(rho_tt / rho - (rho_t / rho) ** 2),
        )


@register(WATER, MethodCorrT.CTM_WWP)
class WaterWagnerPruss(CoolPropWater):
    """IAPWS-95 (Wagner and Pruss, 2002)."""

    fluid = "HEOS::Water"


@register(WATER, MethodCorrT.CTM_WAT, MethodCorrT.CTM_WAR)
class WaterIF97(CoolPropWater):
    """IAPWS-IF97 industrial formulation, used for the HGK water codes."""

    fluid = "IF97::Water"
    impose_phase = False


@register(WATER, MethodCorrT.CTM_WZD)
class WaterZhangDuan(CoolPropWater):
    """Zhang and Duan (2005) water code, evaluated with IAPWS-95."""

    fluid = "HEOS::Water"
