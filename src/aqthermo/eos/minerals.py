"""Pressure corrections for condensed phases (minerals and melts)."""

from __future__ import annotations

import math
from dataclasses import replace

from scipy.integrate import quad
from scipy.optimize import brentq

from aqthermo.eos.base import PressureIntegralModel, SubstanceModel
from aqthermo.eos.registry import P_CORRECTION, register
from aqthermo.models import MethodCorrP


@register(P_CORRECTION, MethodCorrP.CPM_CON)
class ConstantVolume(PressureIntegralModel):
    """Incompressible solid with its reference molar volume."""

    def gibbs_increment(self, temperature, pressure):
        return self.substance.reference.volume * (pressure - self.substance.reference_p)

    def volume(self, temperature, pressure):
        return self.substance.reference.volume


@register(P_CORRECTION, MethodCorrP.CPM_STP)
class StandardState(SubstanceModel):
    """Properties stay at the standard-state pressure; only the volume is reported."""

    def evaluate(self, temperature, pressure, props, context):
        volume = self.substance.reference.volume
        return replace(
            props,
            volume=volume,
            helmholtz_energy=props.gibbs_energy - pressure * volume,
            internal_energy=props.enthalpy - pressure * volume,
        )


@register(P_CORRECTION, MethodCorrP.CPM_VBE)
class MinBerman88(PressureIntegralModel):
    """Berman (1988) volume function.

    V(T, P) = V0 [1 + v1 (P - Pr) + v2 (P - Pr)^2 + v3 (T - Tr) + v4 (T - Tr)^2]
    """

    def gibbs_increment(self, temperature, pressure):
        coeffs = self.require(self.substance.volume, "volume")
        v0 = self.substance.reference.volume
        dt = temperature - self.substance.reference_t
        dp = pressure - self.substance.reference_p
        return v0 * (
            (1.0 + coeffs.v3 * dt + coeffs.v4 * dt**2) * dp
            + coeffs.v1 * dp**2 / 2.0
            + coeffs.v2 * dp**3 / 3.0
        )

    def volume(self, temperature, pressure):
        coeffs = self.require(self.substance.volume, "volume")
        dt = temperature - self.substance.reference_t
        dp = pressure - self.substance.reference_p
        return self.substance.reference.volume * (
            1.0 + coeffs.v1 * dp + coeffs.v2 * dp**2 + coeffs.v3 * dt + coeffs.v4 * dt**2
        )


@register(P_CORRECTION, MethodCorrP.CPM_CEH)
class MinMurnaghan(PressureIntegralModel):
    """Murnaghan equation of Holland and Powell (1998).

    Thermal expansion uses the simplified alpha(T) of the dataset and the
    bulk modulus falls off linearly with temperature.
    """

    def _volume_and_modulus(self, temperature: float):
        coeffs = self.require(self.substance.volume, "volume")
        if coeffs.kappa0 <= 0.0:
            raise ValueError(
                f"Bulk modulus must be positive for substance `{self.substance.symbol}`"
            )
        tr = self.substance.reference_t
        v_t = self.substance.reference.volume * (
            1.0
            + coeffs.alpha0 * (temperature - tr)
            - 20.0 * coeffs.alpha0 * (math.sqrt(temperature) - math.sqrt(tr))
        )
        k_t = coeffs.kappa0 * (1.0 - 1.5e-4 * (temperature - tr))
        return v_t, k_t

    def gibbs_increment(self, temperature, pressure):
        v_t, k_t = self._volume_and_modulus(temperature)

        def integral(p: float) -> float:
            return v_t * k_t / 3.0 * ((1.0 + 4.0 * p / k_t) ** 0.75 - 1.0)

        return integral(pressure) - integral(self.substance.reference_p)

    def volume(self, temperature, pressure):
        v_t, k_t = self._volume_and_modulus(temperature)
        return v_t * (1.0 + 4.0 * pressure / k_t) ** -0.25


@register(P_CORRECTION, MethodCorrP.CPM_VBM)
class MinBMGottschalk(PressureIntegralModel):
    """Third-order Birch-Murnaghan equation (Gottschalk, 1997).

    The volume at each pressure is found by root finding and the Gibbs
    energy increment is the numerical integral of V dP.
    """

    def _volume_and_modulus(self, temperature: float):
        coeffs = self.require(self.substance.volume, "volume")
        if coeffs.kappa0 <= 0.0:
            raise ValueError(
                f"Bulk modulus must be positive for substance `{self.substance.symbol}`"
            )
        dt = temperature - self.substance.reference_t
        v_t = self.substance.reference.volume * math.exp(coeffs.alpha0 * dt)
        k_t = coeffs.kappa0 + coeffs.dkappa_dt * dt
        return v_t, k_t, coeffs.kappa0_prime

    @staticmethod
    def _pressure(volume: float, v_t: float, k_t: float, k_prime: float) -> float:
        ratio = (v_t / volume) ** (2.0 / 3.0)
        return (
            1.5 * k_t * (ratio**3.5 - ratio**2.5)
            * (1.0 + 0.75 * (k_prime - 4.0) * (ratio - 1.0))
        )

    def _solve_volume(self, pressure: float, v_t: float, k_t: float, k_prime: float) -> float:
        return brentq(
            lambda v: self._pressure(v, v_t, k_t, k_prime) - pressure,
            0.3 * v_t,
            1.2 * v_t,
        )

    def gibbs_increment(self, temperature, pressure):
        v_t, k_t, k_prime = self._volume_and_modulus(temperature)
        value, _ = quad(
            lambda p: self._solve_volume(p, v_t, k_t, k_prime),
            self.substance.reference_p,
            pressure,
        )
        return value

    def volume(self, temperature, pressure):
        v_t, k_t, k_prime = self._volume_and_modulus(temperature)
        return self._solve_volume(pressure, v_t, k_t, k_prime)
