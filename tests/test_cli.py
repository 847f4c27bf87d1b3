import json
import os
import tempfile
import unittest

from typer.testing import CliRunner

from aqthermo.cli import app
from aqthermo.database import Database

from sample_records import QUARTZ, cp_substance, reaction, reaction_derived


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()
        database = Database(
            substances=[QUARTZ, cp_substance("A"), reaction_derived("X", "R")],
            reactions=[reaction("R", {"X": 1.0, "A": -1.0}, log_k=1.5)],
        )
        with open(os.path.join(self.tmp.name, "records.json"), "w", encoding="utf-8") as f:
            json.dump(database.to_dict(), f)
        self.config = os.path.join(self.tmp.name, "config.json")
        with open(self.config, "w", encoding="utf-8") as f:
            json.dump({"database": "records.json"}, f)

    def tearDown(self):
        self.tmp.cleanup()

    def test_formula(self):
        result = self.runner.invoke(app, ["formula", "Al(OH)4-"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(json.loads(result.stdout), {"Al": 1.0, "O": 4.0, "H": 4.0, "Zz": -1.0})

    def test_bad_formula(self):
        result = self.runner.invoke(app, ["formula", "Al(OH"])
        self.assertEqual(result.exit_code, 1)

    def test_substance(self):
        result = self.runner.invoke(app, ["substance", self.config, "Quartz", "-T", "298.15"])
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertEqual(payload["symbol"], "Quartz")
        self.assertAlmostEqual(payload["gibbs_energy"], -856288.0)

    def test_unknown_substance(self):
        result = self.runner.invoke(app, ["substance", self.config, "Calcite"])
        self.assertEqual(result.exit_code, 1)

    def test_missing_record_file(self):
        missing = os.path.join(self.tmp.name, "missing.sqlite")
        with open(self.config, "w", encoding="utf-8") as f:
            json.dump({"database": "missing.sqlite"}, f)
        result = self.runner.invoke(app, ["substance", self.config, "Quartz"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("does not exist", result.output)
        self.assertFalse(os.path.exists(missing))

    def test_reaction_from_reactants(self):
        result = self.runner.invoke(
            app, ["reaction", self.config, "R", "--from-reactants", "-T", "350"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(result.stdout)
        self.assertIn("status", payload)
        self.assertIn("A; ", payload["status"]["gibbs_energy"])

    def test_sweep(self):
        csv_path = os.path.join(self.tmp.name, "quartz.csv")
        result = self.runner.invoke(
            app,
            ["sweep", self.config, "Quartz", "--csv", csv_path, "--t-start", "300",
             "--t-stop", "400", "--points", "3"],
        )
        self.assertEqual(result.exit_code, 0, result.output)
        with open(csv_path, encoding="utf-8") as f:
            lines = f.read().splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("T,P,Cp"))


if __name__ == '__main__':
    unittest.main()
