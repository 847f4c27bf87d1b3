import math
import unittest

from aqthermo.constants import R_GAS
from aqthermo.eos import GEN_EOS, P_CORRECTION, REACTION_T, REGISTRY, T_CORRECTION
from aqthermo.eos.cp_integration import heat_capacity, integrate_cp
from aqthermo.eos.gases import CORK, CorrespondingStatesGas, PengRobinson78, PRSV, SoaveRedlichKwong
from aqthermo.eos.hkf import born_coefficient, g_function
from aqthermo.eos.water_ideal_gas import water_ideal_gas
from aqthermo.exceptions import UnsupportedMethod
from aqthermo.models import (
    AggregateState,
    CpInterval,
    CriticalParameters,
    MethodCorrP,
    MethodCorrT,
    MethodGenEoS,
)
from aqthermo.properties import ThermoPropertiesSubstance

from sample_records import cp_substance

CO2_CRITICAL = CriticalParameters(tc=304.13, pc=73.77, omega=0.225, kappa1=0.04285)


def gas(method_p):
    return cp_substance("CO2", formula="CO2", aggregate_state=AggregateState.GAS,
                        method_p=method_p, critical=CO2_CRITICAL)


class TestRegistry(unittest.TestCase):
    def test_no_op_codes(self):
        self.assertIsNone(REGISTRY.lookup(T_CORRECTION, MethodCorrT.CTM_CST, "substance", "A"))
        self.assertIsNone(REGISTRY.lookup(P_CORRECTION, None, "substance", "A"))
        self.assertFalse(REGISTRY.supports(REACTION_T, None))

    def test_unsupported_code(self):
        with self.assertRaises(UnsupportedMethod) as ctx:
            REGISTRY.lookup(GEN_EOS, MethodGenEoS.CTPM_WF97, "substance", "A")
        self.assertIn("CTPM_WF97", str(ctx.exception))
        self.assertEqual(ctx.exception.axis, GEN_EOS)

    def test_copy_is_independent(self):
        registry = REGISTRY.copy()

        @registry.register(P_CORRECTION, MethodCorrP.CPM_GAS)
        class Dummy:
            pass

        self.assertIs(registry.lookup(P_CORRECTION, MethodCorrP.CPM_GAS, "substance", "A"), Dummy)
        self.assertFalse(REGISTRY.supports(P_CORRECTION, MethodCorrP.CPM_GAS))


class TestCpPolynomial(unittest.TestCase):
    def test_terms(self):
        self.assertEqual(heat_capacity((10.0,), 300.0), 10.0)
        self.assertAlmostEqual(heat_capacity((0.0, 0.02, 1.0e5), 200.0), 4.0 + 2.5)
        self.assertAlmostEqual(heat_capacity((0.0,) * 10 + (1.0,), 300.0), math.log(300.0))

    def test_integration_across_intervals(self):
        intervals = [
            CpInterval(t_min=200.0, t_max=400.0, coefficients=(10.0,)),
            CpInterval(t_min=400.0, t_max=800.0, coefficients=(20.0,)),
        ]
        cp_integral, cp_t_integral = integrate_cp(intervals, 300.0, 500.0)
        self.assertAlmostEqual(cp_integral, 10.0 * 100.0 + 20.0 * 100.0)
        self.assertAlmostEqual(
            cp_t_integral, 10.0 * math.log(400.0 / 300.0) + 20.0 * math.log(500.0 / 400.0)
        )
        backwards = integrate_cp(intervals, 500.0, 300.0)
        self.assertAlmostEqual(backwards[0], -cp_integral)


class TestGases(unittest.TestCase):
    def test_cubic_equations_approach_ideal_gas(self):
        for model in (PengRobinson78, PRSV, SoaveRedlichKwong):
            with self.subTest(model=model.__name__):
                eos = model(gas(MethodCorrP.CPM_PR78))
                self.assertAlmostEqual(eos.compressibility(600.0, 1.0), 1.0, delta=0.005)
                self.assertAlmostEqual(eos.ln_fugacity_coefficient(600.0, 1.0), 0.0, delta=0.005)

    def test_cubic_compressibility_below_one(self):
        eos = PengRobinson78(gas(MethodCorrP.CPM_PR78))
        z = eos.compressibility(350.0, 100.0)
        self.assertLess(z, 1.0)
        self.assertGreater(z, 0.3)
        self.assertLess(eos.ln_fugacity_coefficient(350.0, 100.0), 0.0)

    def test_corresponding_states(self):
        eos = CorrespondingStatesGas(gas(MethodCorrP.CPM_EMP))
        self.assertLess(eos.ln_fugacity_coefficient(400.0, 10.0), 0.0)
        self.assertAlmostEqual(
            eos.volume(400.0, 10.0),
            eos.compressibility(400.0, 10.0) * R_GAS * 400.0 / 10.0,
        )

    def test_cork_volume_is_near_ideal_at_low_pressure(self):
        eos = CORK(gas(MethodCorrP.CPM_CORK))
        ideal = R_GAS * 1000.0 / 1.0
        self.assertAlmostEqual(eos.volume(1000.0, 1.0) / ideal, 1.0, delta=0.01)

    def test_gas_correction_through_evaluate(self):
        eos = PengRobinson78(gas(MethodCorrP.CPM_PR78))
        base = ThermoPropertiesSubstance(gibbs_energy=-394000.0, entropy=213.8)
        props = eos.evaluate(500.0, 50.0, base, None)
        expected = R_GAS * 500.0 * (math.log(50.0) + eos.ln_fugacity_coefficient(500.0, 50.0))
        self.assertAlmostEqual(props.gibbs_energy, -394000.0 + expected, places=6)
        self.assertLess(props.entropy, 213.8)

    def test_missing_critical_parameters(self):
        eos = PengRobinson78(cp_substance("G", method_p=MethodCorrP.CPM_PR78))
        with self.assertRaises(ValueError):
            eos.compressibility(500.0, 10.0)


class TestHKFFunctions(unittest.TestCase):
    def test_g_function_vanishes_for_dense_water(self):
        self.assertEqual(g_function(298.15, 1.0, 1.0), 0.0)
        self.assertEqual(g_function(298.15, 1000.0, 1.02), 0.0)
        self.assertLess(g_function(573.15, 1000.0, 0.75), 0.0)

    def test_born_coefficient(self):
        self.assertEqual(born_coefficient(0.0, 1.0e4, -5.0), 1.0e4)
        self.assertAlmostEqual(born_coefficient(1.0, 33060.0, 0.0), 33060.0, places=6)
        self.assertAlmostEqual(born_coefficient(-2.0, 314460.0, 0.0), 314460.0, places=5)


class TestWaterIdealGas(unittest.TestCase):
    def test_reference_values(self):
        props = water_ideal_gas(298.15)
        self.assertAlmostEqual(props.gibbs_energy, -228582.0)
        self.assertAlmostEqual(props.enthalpy, -241826.0)
        self.assertAlmostEqual(props.entropy, 188.835)
        self.assertAlmostEqual(props.heat_capacity_cp, 33.6, delta=0.3)

    def test_heating(self):
        cold, hot = water_ideal_gas(298.15), water_ideal_gas(600.0)
        self.assertGreater(hot.enthalpy, cold.enthalpy)
        self.assertAlmostEqual(hot.heat_capacity_cp - hot.heat_capacity_cv, R_GAS)


if __name__ == '__main__':
    unittest.main()
