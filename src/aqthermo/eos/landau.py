"""Landau theory of lambda transitions, Holland and Powell (1998)."""

from __future__ import annotations

import math
from dataclasses import replace

from aqthermo.eos.base import SubstanceModel
from aqthermo.eos.registry import T_CORRECTION, register
from aqthermo.models import MethodCorrT


@register(T_CORRECTION, MethodCorrT.CTM_CHP)
class HPLandau(SubstanceModel):
    """Adds the excess Landau contribution to the baseline properties.

    The critical temperature rises linearly with pressure at ``vmax / smax``.
    Above it the order parameter is zero and only the reference-state terms
    remain.
    """

    def evaluate(self, temperature, pressure, props, context):
        landau = self.require(self.substance.landau, "landau")
        tr = self.substance.reference_t
        pr = self.substance.reference_p
        t = temperature
        smax, vmax, tc0 = landau.smax, landau.vmax, landau.tc0

        q0 = (1.0 - tr / tc0) ** 0.25 if tr < tc0 else 0.0
        tc = tc0 + vmax / smax * (pressure - pr)
        if t < tc:
            q = (1.0 - t / tc) ** 0.25
            cp = smax * t / (2.0 * tc * math.sqrt(1.0 - t / tc))
        else:
            q, cp = 0.0, 0.0

        gibbs_energy = (
            smax * ((t - tc) * q**2 + tc * q**6 / 3.0)
            + smax * (tc0 * (q0**2 - q0**6 / 3.0) - t * q0**2)
            + vmax * q0**2 * (pressure - pr)
        )
        entropy = smax * (q0**2 - q**2)
        enthalpy = gibbs_energy + t * entropy
        volume = vmax * (q0**2 - q**2 + q**6 / 3.0)

        return replace(
            props,
            gibbs_energy=props.gibbs_energy + gibbs_energy,
            enthalpy=props.enthalpy + enthalpy,
            entropy=props.entropy + entropy,
            heat_capacity_cp=props.heat_capacity_cp + cp,
            heat_capacity_cv=props.heat_capacity_cv + cp,
            volume=props.volume + volume,
            helmholtz_energy=props.helmholtz_energy + gibbs_energy - pressure * volume,
            internal_energy=props.internal_energy + enthalpy - pressure * volume,
        )
