"""SQLite persistence of substance and reaction records."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

from aqthermo.database import Database
from aqthermo.models import Reaction, Substance

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS substance (
  symbol TEXT PRIMARY KEY,
  name TEXT,
  formula TEXT,
  aggregate_state TEXT,
  payload JSON,
  updated_utc TEXT
);
CREATE TABLE IF NOT EXISTS reaction (
  symbol TEXT PRIMARY KEY,
  name TEXT,
  reactants JSON,
  payload JSON,
  updated_utc TEXT
);
"""


def connect(project_file: str | Path) -> sqlite3.Connection:
    """Open (and create) a SQLite record file."""
    path = Path(project_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    connection = sqlite3.connect(path)
    connection.execute("PRAGMA foreign_keys = ON;")
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    """Ensure the record tables exist."""
    connection.executescript(SCHEMA_SQL)
    connection.commit()


def save_substance(connection: sqlite3.Connection, substance: Substance) -> None:
    """Insert or replace a substance record."""
    payload = substance.to_dict()
    connection.execute(
        "INSERT OR REPLACE INTO substance"
        " (symbol, name, formula, aggregate_state, payload, updated_utc)"
        " VALUES (?, ?, ?, ?, ?, ?)",
        (
            substance.symbol,
            substance.name,
            substance.formula,
            substance.aggregate_state.value,
            _json_dumps(payload),
            _utc_now(),
        ),
    )
    connection.commit()


def save_reaction(connection: sqlite3.Connection, reaction: Reaction) -> None:
    """Insert or replace a reaction record."""
    connection.execute(
        "INSERT OR REPLACE INTO reaction (symbol, name, reactants, payload, updated_utc)"
        " VALUES (?, ?, ?, ?, ?)",
        (
            reaction.symbol,
            reaction.name,
            _json_dumps(dict(reaction.reactants)),
            _json_dumps(reaction.to_dict()),
            _utc_now(),
        ),
    )
    connection.commit()


def save_database(connection: sqlite3.Connection, database: Database) -> None:
    ensure_schema(connection)
    for substance in database.substances():
        save_substance(connection, substance)
    for reaction in database.reactions():
        save_reaction(connection, reaction)


def load_database(connection: sqlite3.Connection) -> Database:
    """Read every stored record into a new ``Database``."""
    ensure_schema(connection)
    substances = [
        Substance.from_dict(json.loads(payload))
        for (payload,) in connection.execute("SELECT payload FROM substance ORDER BY symbol")
    ]
    reactions = [
        Reaction.from_dict(json.loads(payload))
        for (payload,) in connection.execute("SELECT payload FROM reaction ORDER BY symbol")
    ]
    logger.info(f"Loaded {len(substances)} substances and {len(reactions)} reactions from SQLite")
    return Database(substances, reactions)


def _json_dumps(payload: Mapping[str, object]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()
