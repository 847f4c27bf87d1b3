import csv
import os
import tempfile
import unittest

from aqthermo.export import HEADER, append_state_row
from aqthermo.properties import PropertiesSolvent, ThermoPropertiesSubstance


class TestCsvExport(unittest.TestCase):
    def test_header_written_once(self):
        props = ThermoPropertiesSubstance(
            gibbs_energy=-237181.0123456789,
            enthalpy=-285830.0,
            entropy=69.92,
            heat_capacity_cp=75.3,
            heat_capacity_cv=74.5,
            volume=1.8068,
            helmholtz_energy=-237183.0,
            internal_energy=-285832.0,
        )
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "states.csv")
            append_state_row(path, 298.15, 1.0, props, PropertiesSolvent(density=997.05))
            append_state_row(path, 308.15, 1.0, props)
            with open(path, newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f))

        self.assertEqual(len(rows), 3)
        self.assertEqual(tuple(rows[0]), HEADER)
        self.assertEqual(len(rows[1]), 11)
        first = dict(zip(HEADER, rows[1]))
        self.assertEqual(float(first["T"]), 298.15)
        self.assertEqual(float(first["RHO"]), 997.05)
        self.assertEqual(float(first["G"]), -237181.0123456789)
        self.assertEqual(float(first["V"]), 1.8068)
        second = dict(zip(HEADER, rows[2]))
        self.assertEqual(float(second["RHO"]), 0.0)

    def test_empty_file_gets_header(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "states.csv")
            open(path, "w").close()
            append_state_row(path, 400.0, 10.0, ThermoPropertiesSubstance())
            with open(path, newline="", encoding="utf-8") as f:
                rows = list(csv.reader(f))
        self.assertEqual(tuple(rows[0]), HEADER)
        self.assertEqual(len(rows), 2)


if __name__ == '__main__':
    unittest.main()
