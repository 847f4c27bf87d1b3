"""Empirical Cp(T) integration from the reference temperature."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from scipy.integrate import quad

from aqthermo.eos.base import SubstanceModel
from aqthermo.eos.registry import GEN_EOS, register
from aqthermo.models import CpInterval, MethodGenEoS
from aqthermo.properties import ThermoPropertiesSubstance


def heat_capacity(coefficients: Sequence[float], temperature: float) -> float:
    """Evaluate the 11-term Cp(T) polynomial (missing terms are zero)."""
    a = tuple(coefficients) + (0.0,) * (11 - len(coefficients))
    t = temperature
    return (
        a[0]
        + a[1] * t
        + a[2] / t**2
        + a[3] / math.sqrt(t)
        + a[4] * t**2
        + a[5] * t**3
        + a[6] * t**4
        + a[7] / t**3
        + a[8] / t
        + a[9] * math.sqrt(t)
        + a[10] * math.log(t)
    )


def _interval_at(intervals: Sequence[CpInterval], temperature: float) -> CpInterval:
    for interval in intervals:
        if interval.t_min <= temperature <= interval.t_max:
            return interval
    # extrapolate with the nearest interval
    if temperature < intervals[0].t_min:
        return intervals[0]
    return intervals[-1]


def integrate_cp(
    intervals: Sequence[CpInterval], t_start: float, t_stop: float
) -> Tuple[float, float]:
    """Return (∫Cp dT, ∫Cp/T dT) from ``t_start`` to ``t_stop``.

    The integral is split at interval boundaries so that every piece uses the
    coefficients valid on it.
    """
    if t_start == t_stop:
        return 0.0, 0.0
    sign = 1.0
    low, high = t_start, t_stop
    if low > high:
        low, high, sign = high, low, -1.0

    edges = sorted(
        {low, high}
        | {i.t_min for i in intervals if low < i.t_min < high}
        | {i.t_max for i in intervals if low < i.t_max < high}
    )
    cp_integral = 0.0
    cp_t_integral = 0.0
    for left, right in zip(edges[:-1], edges[1:]):
        coefficients = _interval_at(intervals, 0.5 * (left + right)).coefficients
        cp_integral += quad(lambda t: heat_capacity(coefficients, t), left, right)[0]
        cp_t_integral += quad(lambda t: heat_capacity(coefficients, t) / t, left, right)[0]
    return sign * cp_integral, sign * cp_t_integral


@register(GEN_EOS, MethodGenEoS.CTPM_CPT)
class EmpiricalCpIntegration(SubstanceModel):
    """Standard properties from reference values and Cp(T) integration.

    Without Cp intervals the reference heat capacity is taken as constant.
    The molar volume stays at its reference value.
    """

    def evaluate(self, temperature, pressure, props, context):
        substance = self.substance
        ref = substance.reference
        tr = substance.reference_t
        t = temperature

        if substance.cp_intervals:
            intervals = sorted(substance.cp_intervals, key=lambda i: i.t_min)
            cp = heat_capacity(_interval_at(intervals, t).coefficients, t)
            cp_integral, cp_t_integral = integrate_cp(intervals, tr, t)
        else:
            cp = ref.heat_capacity_cp
            cp_integral = cp * (t - tr)
            cp_t_integral = cp * math.log(t / tr)

        enthalpy = ref.enthalpy + cp_integral
        entropy = ref.entropy + cp_t_integral
        gibbs_energy = ref.gibbs_energy - ref.entropy * (t - tr) + cp_integral - t * cp_t_integral
        volume = ref.volume
        return ThermoPropertiesSubstance(
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=entropy,
            heat_capacity_cp=cp,
            heat_capacity_cv=cp,
            volume=volume,
            helmholtz_energy=gibbs_energy - pressure * volume,
            internal_energy=enthalpy - pressure * volume,
        )
