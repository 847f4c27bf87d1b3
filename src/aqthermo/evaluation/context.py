"""Shared state of one evaluation graph."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Tuple

from aqthermo.conventions import Conventions
from aqthermo.database import Database
from aqthermo.eos import REGISTRY, ModelRegistry
from aqthermo.exceptions import CyclicDefinition
from aqthermo.memo import memoize

logger = logging.getLogger(__name__)

DEFAULT_SOLVENT = "H2O@"


class EvaluationContext:
    """Record store, conventions, model registry and the memoized entry points.

    Every evaluator and model receives the context and requests other
    properties only through ``substance_properties``, ``solvent_properties``,
    ``electro_solvent_properties`` and ``reaction_properties``, so each
    ``(T, P, symbol)`` is computed at most once per context. Not thread-safe.
    """

    def __init__(
        self,
        database: Database,
        conventions: Conventions | None = None,
        solvent_symbol: str = DEFAULT_SOLVENT,
        registry: ModelRegistry | None = None,
    ) -> None:
        # imported here, the evaluators import this module for type hints
        from aqthermo.evaluation import reaction, solvent, substance

        self.database = database
        self.conventions = conventions or Conventions()
        self.registry = registry or REGISTRY
        self._solvent_symbol = solvent_symbol
        self._in_flight: List[Tuple[str, str]] = []

        self.substance_properties = memoize(
            self._guarded("substance", substance.substance_properties)
        )
        self.solvent_properties = memoize(
            self._guarded("solvent", solvent.solvent_properties)
        )
        self.electro_solvent_properties = memoize(
            self._guarded("electro", solvent.electro_solvent_properties)
        )
        self.reaction_properties = memoize(
            self._guarded("reaction", reaction.reaction_properties)
        )

    @property
    def solvent_symbol(self) -> str:
        return self._solvent_symbol

    @solvent_symbol.setter
    def solvent_symbol(self, symbol: str) -> None:
        if symbol != self._solvent_symbol:
            logger.info(f"Solvent changed from {self._solvent_symbol} to {symbol}")
            self._solvent_symbol = symbol
            self.cache_clear()

    def cache_clear(self) -> None:
        for entry in self._entry_points():
            entry.cache_clear()
        logger.info("Cleared property caches")

    def cache_info(self) -> dict:
        return {
            "substance": self.substance_properties.cache_info(),
            "solvent": self.solvent_properties.cache_info(),
            "electro": self.electro_solvent_properties.cache_info(),
            "reaction": self.reaction_properties.cache_info(),
        }

    def _entry_points(self):
        return (
            self.substance_properties,
            self.solvent_properties,
            self.electro_solvent_properties,
            self.reaction_properties,
        )

    @contextmanager
    def visiting(self, kind: str, symbol: str) -> Iterator[None]:
        """Mark ``symbol`` as in flight; re-entering it raises ``CyclicDefinition``."""
        key = (kind, symbol)
        if key in self._in_flight:
            chain = [s for _, s in self._in_flight[self._in_flight.index(key):]]
            raise CyclicDefinition(chain + [symbol])
        self._in_flight.append(key)
        try:
            yield
        finally:
            self._in_flight.pop()

    def _guarded(self, kind, fn):
        def entry(temperature: float, pressure: float, symbol: str):
            with self.visiting(kind, symbol):
                return fn(temperature, pressure, symbol, self)

        entry.__name__ = f"{kind}_properties"
        return entry
