"""Dielectric constant of water and the Born functions.

Each model only supplies eps(T, rho); the derivatives along T and P follow
from its partial derivatives in T and rho and the density derivatives of the
solvent.
"""

from __future__ import annotations

import math
from abc import abstractmethod

from aqthermo.eos.base import DielectricModel
from aqthermo.eos.registry import DIELECTRIC, register
from aqthermo.models import MethodGenEoS
from aqthermo.properties import ElectroPropertiesSolvent, PropertiesSolvent

_STEP_T = 0.01  # K
_STEP_RHO = 0.01  # kg/m³


def born_functions(
    epsilon: float,
    epsilon_t: float,
    epsilon_p: float,
    epsilon_tt: float,
    epsilon_tp: float,
    epsilon_pp: float,
) -> ElectroPropertiesSolvent:
    e2, e3 = epsilon**2, epsilon**3
    return ElectroPropertiesSolvent(
        epsilon=epsilon,
        epsilon_t=epsilon_t,
        epsilon_p=epsilon_p,
        epsilon_tt=epsilon_tt,
        epsilon_tp=epsilon_tp,
        epsilon_pp=epsilon_pp,
        born_z=-1.0 / epsilon,
        born_y=epsilon_t / e2,
        born_q=epsilon_p / e2,
        born_x=epsilon_tt / e2 - 2.0 * epsilon_t**2 / e3,
        born_u=epsilon_tp / e2 - 2.0 * epsilon_t * epsilon_p / e3,
        born_n=epsilon_pp / e2 - 2.0 * epsilon_p**2 / e3,
    )


class DensityDielectricModel(DielectricModel):
    @abstractmethod
    def epsilon(self, temperature: float, density: float) -> float:
        """Dielectric constant at temperature (K) and density (kg/m³)."""

    def electro_properties(self, solvent: PropertiesSolvent) -> ElectroPropertiesSolvent:
        t, rho = solvent.temperature, solvent.density
        ht, hr = _STEP_T, _STEP_RHO
        eps = self.epsilon(t, rho)
        e_t_up, e_t_down = self.epsilon(t + ht, rho), self.epsilon(t - ht, rho)
        e_r_up, e_r_down = self.epsilon(t, rho + hr), self.epsilon(t, rho - hr)

        e_t = (e_t_up - e_t_down) / (2.0 * ht)
        e_r = (e_r_up - e_r_down) / (2.0 * hr)
        e_tt = (e_t_up - 2.0 * eps + e_t_down) / ht**2
        e_rr = (e_r_up - 2.0 * eps + e_r_down) / hr**2
        e_tr = (
            self.epsilon(t + ht, rho + hr)
            - self.epsilon(t + ht, rho - hr)
            - self.epsilon(t - ht, rho + hr)
            + self.epsilon(t - ht, rho - hr)
        ) / (4.0 * ht * hr)

        r_t, r_p = solvent.density_t, solvent.density_p
        return born_functions(
            epsilon=eps,
            epsilon_t=e_t + e_r * r_t,
            epsilon_p=e_r * r_p,
            epsilon_tt=e_tt + 2.0 * e_tr * r_t + e_rr * r_t**2 + e_r * solvent.density_tt,
            epsilon_tp=e_tr * r_p + e_rr * r_t * r_p + e_r * solvent.density_tp,
            epsilon_pp=e_rr * r_p**2 + e_r * solvent.density_pp,
        )


@register(DIELECTRIC, MethodGenEoS.CTPM_WJNR, MethodGenEoS.CTPM_WJNG)
class WaterElectroJN91(DensityDielectricModel):
    """Johnson and Norton (1991)."""

    A = (
        14.70333593,
        212.8462733,
        -115.4445173,
        19.55210915,
        -83.30347980,
        32.13240048,
        -6.694098645,
        -37.86202045,
        68.87359646,
        -27.29401652,
    )

    def epsilon(self, temperature, density):
        a = self.A
        t = temperature / 298.15
        rho = density / 1000.0
        k1 = a[0] / t
        k2 = a[1] / t + a[2] + a[3] * t
        k3 = a[4] / t + a[5] * t + a[6] * t**2
        k4 = a[7] / t**2 + a[8] / t + a[9]
        return 1.0 + k1 * rho + k2 * rho**2 + k3 * rho**3 + k4 * rho**4


@register(DIELECTRIC, MethodGenEoS.CTPM_WSV14)
class WaterElectroSverjensky2014(DensityDielectricModel):
    """Sverjensky et al. (2014), eps = exp(b) rho^a with a and b in T (°C)."""

    A = (-1.57637700752506e-3, 6.81028783422197e-2, 0.754875480393944)
    B = (-8.01665106535394e-5, -6.87161761831994e-2, 4.74797272182151)

    def epsilon(self, temperature, density):
        t = max(temperature - 273.15, 0.0)
        a = self.A[0] * t + self.A[1] * math.sqrt(t) + self.A[2]
        b = self.B[0] * t + self.B[1] * math.sqrt(t) + self.B[2]
        return math.exp(b) * (density / 1000.0) ** a


@register(DIELECTRIC, MethodGenEoS.CTPM_WF97)
class WaterElectroFernandez1997(DensityDielectricModel):
    """IAPWS release on the static dielectric constant (Fernandez et al., 1997)."""

    N = (
        0.978224486826,
        -0.957771379375,
        0.237511794148,
        0.714692244396,
        -0.298217036956,
        -0.108863472196,
        0.0949327488264,
        -0.00980469816509,
        1.65167634970e-5,
        9.37359795772e-5,
        -1.23179218720e-10,
    )
    DELTA_EXPONENTS = (1, 1, 1, 2, 3, 3, 4, 5, 6, 7, 10)
    TAU_EXPONENTS = (0.25, 1.0, 2.5, 1.5, 1.5, 2.5, 2.0, 2.0, 5.0, 0.5, 10.0)
    N12 = 0.00196096504426

    RHO_CRITICAL = 322.0  # kg/m³
    T_CRITICAL = 647.096  # K
    DIPOLE = 6.138e-30  # C·m
    POLARIZABILITY = 1.636e-40  # C²·m²/J
    VACUUM_PERMITTIVITY = 8.854187817e-12
    BOLTZMANN = 1.380658e-23
    AVOGADRO = 6.0221367e23
    MOLAR_MASS = 0.018015268  # kg/mol

    def epsilon(self, temperature, density):
        delta = density / self.RHO_CRITICAL
        tau = self.T_CRITICAL / temperature
        terms = zip(self.N, self.DELTA_EXPONENTS, self.TAU_EXPONENTS)
        g = 1.0 + sum(n * delta**i * tau**j for n, i, j in terms)
        g += self.N12 * delta * (temperature / 228.0 - 1.0) ** -1.2

        molar_density = density / self.MOLAR_MASS
        a = (
            self.AVOGADRO * self.DIPOLE**2 * molar_density * g
            / (self.VACUUM_PERMITTIVITY * self.BOLTZMANN * temperature)
        )
        b = self.AVOGADRO * self.POLARIZABILITY * molar_density / (3.0 * self.VACUUM_PERMITTIVITY)
        root = math.sqrt(9.0 + 2.0 * a + 18.0 * b + a**2 + 10.0 * a * b + 9.0 * b**2)
        return (1.0 + a + 5.0 * b + root) / (4.0 - 4.0 * b)
