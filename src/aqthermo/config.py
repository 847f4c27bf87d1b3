"""Engine configuration read from a JSON file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from aqthermo.conventions import Conventions
from aqthermo.database import Database
from aqthermo.engine import ThermoEvaluator
from aqthermo.evaluation.context import DEFAULT_SOLVENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfig:
    """Record source, solvent and conventions of an evaluator.

    ``database`` is a JSON record document or a SQLite project file
    (``.sqlite`` / ``.db``); a relative path is resolved against the config
    file's directory.
    """

    database: Path
    solvent: str = DEFAULT_SOLVENT
    conventions: Conventions = field(default_factory=Conventions)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base_dir: Path | None = None) -> "EngineConfig":
        if "database" not in data:
            raise ValueError("Configuration is missing the `database` entry")
        database = Path(data["database"])
        if base_dir is not None and not database.is_absolute():
            database = base_dir / database
        conventions = data.get("conventions", {})
        return cls(
            database=database,
            solvent=data.get("solvent", DEFAULT_SOLVENT),
            conventions=Conventions(
                aqueous=conventions.get("aqueous", Conventions.aqueous),
                water=conventions.get("water", Conventions.water),
            ),
        )

    def load_database(self) -> Database:
        if not self.database.is_file():
            raise ValueError(f"Record file `{self.database}` does not exist")
        if self.database.suffix in (".sqlite", ".db"):
            from aqthermo.persistence import sqlite_store

            connection = sqlite_store.connect(self.database)
            try:
                return sqlite_store.load_database(connection)
            finally:
                connection.close()
        return Database.from_json(self.database)

    def build_evaluator(self) -> ThermoEvaluator:
        return ThermoEvaluator(
            self.load_database(),
            conventions=self.conventions,
            solvent_symbol=self.solvent,
        )


def load_config(path: str | Path) -> EngineConfig:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.info(f"Loaded configuration from {path}")
    return EngineConfig.from_dict(data, base_dir=path.parent)
