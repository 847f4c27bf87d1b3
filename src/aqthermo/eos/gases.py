"""Fugacity corrections for gases.

Every model adds ``RT ln(P / Pr) + RT ln phi`` to the ideal-gas properties at
the standard pressure; derived properties follow from the temperature and
pressure derivatives of that increment (see ``PressureIntegralModel``).
"""

from __future__ import annotations

import logging
import math

import numpy as np

from aqthermo.constants import R_GAS
from aqthermo.eos.base import PressureIntegralModel
from aqthermo.eos.registry import P_CORRECTION, register
from aqthermo.models import CriticalParameters, MethodCorrP

logger = logging.getLogger(__name__)

SQRT2 = math.sqrt(2.0)


class _GasModel(PressureIntegralModel):
    def _check_pressure(self, pressure: float) -> None:
        if pressure <= 0.0:
            raise ValueError(
                f"Gas `{self.substance.symbol}` needs a positive pressure, got {pressure} bar"
            )

    def ln_fugacity_coefficient(self, temperature: float, pressure: float) -> float:
        return 0.0

    def compressibility(self, temperature: float, pressure: float) -> float:
        return 1.0

    def gibbs_increment(self, temperature, pressure):
        self._check_pressure(pressure)
        return R_GAS * temperature * (
            math.log(pressure / self.substance.reference_p)
            + self.ln_fugacity_coefficient(temperature, pressure)
        )

    def volume(self, temperature, pressure):
        self._check_pressure(pressure)
        return self.compressibility(temperature, pressure) * R_GAS * temperature / pressure

    @property
    def critical(self) -> CriticalParameters:
        return self.require(self.substance.critical, "critical")


@register(P_CORRECTION, MethodCorrP.CPM_OFF)
class IdealGas(_GasModel):
    pass


class CubicEOS(_GasModel):
    """Generic two-parameter cubic equation of state.

    P = RT / (V - b) - a(T) / ((V + delta1 b)(V + delta2 b))
    """

    omega_a = 0.45724
    omega_b = 0.07780
    delta1 = 1.0 + SQRT2
    delta2 = 1.0 - SQRT2

    def kappa(self, reduced_t: float) -> float:
        w = self.critical.omega
        return 0.37464 + 1.54226 * w - 0.26992 * w**2

    def alpha(self, temperature: float) -> float:
        reduced_t = temperature / self.critical.tc
        return (1.0 + self.kappa(reduced_t) * (1.0 - math.sqrt(reduced_t))) ** 2

    def _dimensionless(self, temperature: float, pressure: float):
        crit = self.critical
        reduced_t = temperature / crit.tc
        reduced_p = pressure / crit.pc
        a = self.omega_a * self.alpha(temperature) * reduced_p / reduced_t**2
        b = self.omega_b * reduced_p / reduced_t
        return a, b

    def compressibility(self, temperature, pressure):
        a, b = self._dimensionless(temperature, pressure)
        d1, d2 = self.delta1, self.delta2
        coefficients = [
            1.0,
            -(1.0 - (d1 + d2 - 1.0) * b),
            a + d1 * d2 * b**2 - (d1 + d2) * b * (b + 1.0),
            -(a * b + d1 * d2 * b**2 * (b + 1.0)),
        ]
        roots = np.roots(coefficients)
        real = roots[np.abs(roots.imag) < 1e-10].real
        real = real[real > b]
        if real.size == 0:
            raise ValueError(
                f"No physical compressibility root for `{self.substance.symbol}` "
                f"at T={temperature} K, P={pressure} bar"
            )
        return float(real.max())

    def ln_fugacity_coefficient(self, temperature, pressure):
        a, b = self._dimensionless(temperature, pressure)
        z = self.compressibility(temperature, pressure)
        d1, d2 = self.delta1, self.delta2
        return (
            z
            - 1.0
            - math.log(z - b)
            - a / (b * (d1 - d2)) * math.log((z + d1 * b) / (z + d2 * b))
        )


@register(P_CORRECTION, MethodCorrP.CPM_PR78)
class PengRobinson78(CubicEOS):
    def kappa(self, reduced_t):
        w = self.critical.omega
        if w <= 0.491:
            return 0.37464 + 1.54226 * w - 0.26992 * w**2
        return 0.379642 + 1.48503 * w - 0.164423 * w**2 + 0.016666 * w**3


@register(P_CORRECTION, MethodCorrP.CPM_PRSV)
class PRSV(CubicEOS):
    """Peng-Robinson-Stryjek-Vera, kappa with the kappa1 correction."""

    def kappa(self, reduced_t):
        w = self.critical.omega
        kappa0 = 0.378893 + 1.4897153 * w - 0.17131848 * w**2 + 0.0196554 * w**3
        return kappa0 + self.critical.kappa1 * (1.0 + math.sqrt(reduced_t)) * (0.7 - reduced_t)


@register(P_CORRECTION, MethodCorrP.CPM_SRK)
class SoaveRedlichKwong(CubicEOS):
    omega_a = 0.42748
    omega_b = 0.08664
    delta1 = 1.0
    delta2 = 0.0

    def kappa(self, reduced_t):
        w = self.critical.omega
        return 0.480 + 1.574 * w - 0.176 * w**2


@register(P_CORRECTION, MethodCorrP.CPM_EMP)
class CorrespondingStatesGas(_GasModel):
    """Pitzer-Curl second virial coefficient correlation."""

    def _reduced_b(self, temperature: float) -> float:
        reduced_t = temperature / self.critical.tc
        b0 = 0.083 - 0.422 / reduced_t**1.6
        b1 = 0.139 - 0.172 / reduced_t**4.2
        return b0 + self.critical.omega * b1

    def ln_fugacity_coefficient(self, temperature, pressure):
        crit = self.critical
        return self._reduced_b(temperature) * (pressure / crit.pc) / (temperature / crit.tc)

    def compressibility(self, temperature, pressure):
        return 1.0 + self.ln_fugacity_coefficient(temperature, pressure)


@register(P_CORRECTION, MethodCorrP.CPM_CORK)
class CORK(_GasModel):
    """Compensated Redlich-Kwong equation, corresponding-states form of
    Holland and Powell (1991). Internally in kJ, kbar and K.
    """

    R_KJ = R_GAS / 1000.0

    def _parameters(self, temperature: float):
        tc = self.critical.tc
        pc = self.critical.pc / 1000.0
        a = 5.45963e-5 * tc**2.5 / pc - 8.63920e-6 * tc**1.5 / pc * temperature
        b = 9.18301e-4 * tc / pc
        c = -3.30558e-5 * tc / pc**1.5 + 2.30524e-6 / pc**1.5 * temperature
        d = 6.93054e-7 * tc / pc**2 - 8.38293e-8 / pc**2 * temperature
        return a, b, c, d

    def gibbs_increment(self, temperature, pressure):
        self._check_pressure(pressure)
        a, b, c, d = self._parameters(temperature)
        p = pressure / 1000.0
        rt = self.R_KJ * temperature
        rt_ln_f = (
            rt * math.log(1000.0 * p / self.substance.reference_p)
            + b * p
            + a / (b * math.sqrt(temperature)) * (math.log(rt + b * p) - math.log(rt + 2.0 * b * p))
            + 2.0 / 3.0 * c * p * math.sqrt(p)
            + d / 2.0 * p**2
        )
        return 1000.0 * rt_ln_f

    def volume(self, temperature, pressure):
        self._check_pressure(pressure)
        a, b, c, d = self._parameters(temperature)
        p = pressure / 1000.0
        rt = self.R_KJ * temperature
        # kJ/kbar is J/bar
        return (
            rt / p
            + b
            - a * self.R_KJ * math.sqrt(temperature) / ((rt + b * p) * (rt + 2.0 * b * p))
            + c * math.sqrt(p)
            + d * p
        )
