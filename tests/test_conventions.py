import unittest

from aqthermo.constants import G_TRIPLE, H_TRIPLE, S_TRIPLE
from aqthermo.conventions import (
    BERMAN_BROWN,
    STEAM_TABLES,
    Conventions,
    to_berman_brown,
    to_steam_tables,
)
from aqthermo.properties import ThermoPropertiesSubstance


class TestConventions(unittest.TestCase):
    def test_defaults(self):
        conventions = Conventions()
        self.assertEqual(conventions.aqueous, "Benson-Helgeson")
        self.assertEqual(conventions.water, "default")

    def test_unknown_names_rejected(self):
        with self.assertRaises(ValueError):
            Conventions(aqueous="Helgeson")
        with self.assertRaises(ValueError):
            Conventions(water="IAPWS")
        Conventions(aqueous=BERMAN_BROWN, water=STEAM_TABLES)

    def test_steam_tables_shift(self):
        props = ThermoPropertiesSubstance(gibbs_energy=-237000.0, enthalpy=-285000.0, entropy=70.0,
                                          heat_capacity_cp=75.0, volume=1.8)
        shifted = to_steam_tables(props)
        self.assertAlmostEqual(shifted.gibbs_energy, -237000.0 - G_TRIPLE)
        self.assertAlmostEqual(shifted.enthalpy, -285000.0 - H_TRIPLE)
        self.assertAlmostEqual(shifted.entropy, 70.0 - S_TRIPLE)
        # heat capacity and volume are scale-free
        self.assertEqual(shifted.heat_capacity_cp, 75.0)
        self.assertEqual(shifted.volume, 1.8)

    def test_berman_brown_offset(self):
        props = ThermoPropertiesSubstance(gibbs_energy=-1000.0, enthalpy=-800.0, entropy=10.0)
        shifted = to_berman_brown(props, "H2O", 298.15)
        offset = 298.15 * (2 * 65.34 + 102.57)
        self.assertAlmostEqual(shifted.gibbs_energy, -1000.0 - offset)
        self.assertAlmostEqual(shifted.enthalpy, -800.0 - offset)
        self.assertEqual(shifted.entropy, 10.0)


if __name__ == '__main__':
    unittest.main()
