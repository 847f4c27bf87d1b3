"""Persistence helpers for aqthermo."""

from aqthermo.persistence.sqlite_store import (
    connect,
    ensure_schema,
    load_database,
    save_database,
    save_reaction,
    save_substance,
)

__all__ = [
    "connect",
    "ensure_schema",
    "load_database",
    "save_database",
    "save_reaction",
    "save_substance",
]
