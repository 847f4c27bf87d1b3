import os
import tempfile
import unittest

from aqthermo.database import Database
from aqthermo.persistence import sqlite_store

from sample_records import QUARTZ, WATER_SOLVENT, reaction


class TestSqliteStore(unittest.TestCase):
    def test_save_and_load(self):
        database = Database(
            substances=[QUARTZ, WATER_SOLVENT],
            reactions=[reaction("R", {"Quartz": 1.0, "H2O@": -2.0}, volume_coefficients=(1.0, 0.01))],
        )
        with tempfile.TemporaryDirectory() as tmp:
            connection = sqlite_store.connect(os.path.join(tmp, "project", "records.sqlite"))
            try:
                sqlite_store.save_database(connection, database)
                loaded = sqlite_store.load_database(connection)
                count = connection.execute("SELECT COUNT(*) FROM substance").fetchone()[0]
            finally:
                connection.close()

        self.assertEqual(count, 2)
        self.assertEqual(loaded.get_substance("Quartz"), QUARTZ)
        self.assertEqual(loaded.get_substance("H2O@"), WATER_SOLVENT)
        self.assertEqual(loaded.get_reaction("R"), database.get_reaction("R"))

    def test_save_replaces_existing_record(self):
        with tempfile.TemporaryDirectory() as tmp:
            connection = sqlite_store.connect(os.path.join(tmp, "records.db"))
            try:
                sqlite_store.ensure_schema(connection)
                sqlite_store.save_reaction(connection, reaction("R", {"A": 1.0}, log_k=1.0))
                sqlite_store.save_reaction(connection, reaction("R", {"A": 1.0}, log_k=3.0))
                loaded = sqlite_store.load_database(connection)
            finally:
                connection.close()

        self.assertEqual(len(loaded.reactions()), 1)
        self.assertEqual(loaded.get_reaction("R").reference.log_k, 3.0)


    def test_load_from_empty_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            connection = sqlite_store.connect(os.path.join(tmp, "empty.sqlite"))
            try:
                loaded = sqlite_store.load_database(connection)
            finally:
                connection.close()

        self.assertEqual(loaded.substances(), [])
        self.assertEqual(loaded.reactions(), [])


if __name__ == '__main__':
    unittest.main()
