import unittest

from aqthermo.exceptions import MissingElementData
from aqthermo.formula import CHARGE_ELEMENT, elemental_entropy, parse_formula


class TestParseFormula(unittest.TestCase):
    def test_parentheses_and_charge(self):
        self.assertEqual(
            parse_formula("Al(OH)4-"),
            {"Al": 1.0, "O": 4.0, "H": 4.0, CHARGE_ELEMENT: -1.0},
        )

    def test_valence_annotation(self):
        self.assertEqual(parse_formula("Fe|3|+3"), {"Fe": 1.0, CHARGE_ELEMENT: 3.0})

    def test_aqueous_marker(self):
        self.assertEqual(parse_formula("H2O@"), {"H": 2.0, "O": 1.0})

    def test_multi_digit_charge(self):
        self.assertEqual(parse_formula("Ca+2"), {"Ca": 1.0, CHARGE_ELEMENT: 2.0})
        self.assertEqual(parse_formula("SO4-2")[CHARGE_ELEMENT], -2.0)

    def test_hydrate_group_and_fractional_count(self):
        self.assertEqual(
            parse_formula("CaSO4(H2O)2"),
            {"Ca": 1.0, "S": 1.0, "O": 6.0, "H": 4.0},
        )
        self.assertEqual(parse_formula("Mg0.5Cl"), {"Mg": 0.5, "Cl": 1.0})

    def test_invalid_formulas(self):
        for text in ("", "@", "Al(OH", "Ca)", "ca"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_formula(text)


class TestElementalEntropy(unittest.TestCase):
    def test_water(self):
        self.assertAlmostEqual(elemental_entropy("H2O"), 2 * 65.34 + 102.57)

    def test_charge_contributes_nothing(self):
        self.assertAlmostEqual(elemental_entropy("Na+"), 51.30)

    def test_mapping_input(self):
        self.assertAlmostEqual(elemental_entropy({"Si": 1.0, "O": 2.0}), 18.81 + 2 * 102.57)

    def test_trace_elements(self):
        self.assertAlmostEqual(elemental_entropy("SnO2"), 51.18 + 2 * 102.57)
        self.assertAlmostEqual(elemental_entropy("Au"), 47.49)
        self.assertAlmostEqual(elemental_entropy("ThO2"), 51.80 + 2 * 102.57)

    def test_unknown_element(self):
        with self.assertRaises(MissingElementData) as caught:
            elemental_entropy("Xx2")
        self.assertEqual(caught.exception.element, "Xx")


if __name__ == '__main__':
    unittest.main()
