import json
import os
import tempfile
import unittest

from aqthermo.database import Database
from aqthermo.exceptions import AqthermoError, RecordNotFound
from aqthermo.models import MethodCorrT, Reaction, Substance

from sample_records import QUARTZ, cp_substance, reaction


class TestDatabase(unittest.TestCase):
    def setUp(self):
        self.database = Database(
            substances=[QUARTZ, cp_substance("A")],
            reactions=[reaction("R", {"A": -1.0, "Quartz": 1.0})],
        )

    def test_lookup(self):
        self.assertIs(self.database.get_substance("Quartz"), QUARTZ)
        self.assertTrue(self.database.contains_substance("A"))
        self.assertFalse(self.database.contains_substance("B"))
        self.assertTrue(self.database.contains_reaction("R"))
        self.assertEqual(len(self.database.substances()), 2)
        self.assertEqual(len(self.database.reactions()), 1)

    def test_missing_records(self):
        with self.assertRaises(RecordNotFound) as ctx:
            self.database.get_substance("Calcite")
        self.assertIn("substance `Calcite`", str(ctx.exception))
        self.assertEqual(ctx.exception.symbol, "Calcite")

        # still a lookup error for callers that only know KeyError
        with self.assertRaises(KeyError):
            self.database.get_reaction("R2")
        with self.assertRaises(AqthermoError):
            self.database.get_reaction("R2")

    def test_first_insert_wins(self):
        duplicate = cp_substance("A", gibbs_energy=5.0)
        self.database.add_substance(duplicate)
        self.assertEqual(self.database.get_substance("A").reference.gibbs_energy, -1000.0)

    def test_dict_round_trip(self):
        copy = Database.from_dict(json.loads(json.dumps(self.database.to_dict())))
        self.assertEqual(copy.get_substance("Quartz"), QUARTZ)
        self.assertEqual(copy.get_reaction("R"), self.database.get_reaction("R"))
        self.assertIs(copy.get_reaction("R").method_t, MethodCorrT.CTM_EK1)

    def test_from_json(self):
        document = {
            "substances": [
                {
                    "symbol": "Corundum",
                    "formula": "Al2O3",
                    "aggregate_state": "solid",
                    "method_gen_eos": "CTPM_CPT",
                    "method_t": "CTM_CST",
                    "method_p": "CPM_CON",
                    "reference": {"gibbs_energy": -1582300, "entropy": 50.92, "volume": 2.558},
                    "cp_intervals": [{"t_min": 298.15, "t_max": 2300, "coefficients": [139.5, 0.00589]}],
                }
            ],
            "reactions": [
                {"symbol": "Cor-dis", "reactants": {"Corundum": -1, "Al+3": 2}, "method_t": "CTM_EK0",
                 "reference": {"log_k": 19.6}},
            ],
        }
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "records.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(document, f)
            database = Database.from_json(path)

        corundum = database.get_substance("Corundum")
        self.assertIsInstance(corundum, Substance)
        self.assertEqual(corundum.cp_intervals[0].coefficients, (139.5, 0.00589))
        self.assertEqual(corundum.reference.volume, 2.558)
        cor_dis = database.get_reaction("Cor-dis")
        self.assertIsInstance(cor_dis, Reaction)
        self.assertEqual(cor_dis.reactants, {"Corundum": -1.0, "Al+3": 2.0})
        self.assertEqual(cor_dis.reference.log_k, 19.6)


if __name__ == '__main__':
    unittest.main()
