"""In-memory record store of substances and reactions."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping

from aqthermo.exceptions import RecordNotFound
from aqthermo.models import Reaction, Substance

logger = logging.getLogger(__name__)


class Database:
    """Maps symbols to immutable substance and reaction records.

    The store is populated once (``add_substance`` / ``add_reaction`` or one of
    the loaders) and is read-only while properties are evaluated, so several
    evaluators may share one instance.
    """

    def __init__(
        self,
        substances: Iterable[Substance] = (),
        reactions: Iterable[Reaction] = (),
    ) -> None:
        self._substances: Dict[str, Substance] = {}
        self._reactions: Dict[str, Reaction] = {}
        for substance in substances:
            self.add_substance(substance)
        for reaction in reactions:
            self.add_reaction(reaction)

    def add_substance(self, substance: Substance) -> None:
        # first insert wins, like a map insert
        self._substances.setdefault(substance.symbol, substance)

    def add_reaction(self, reaction: Reaction) -> None:
        self._reactions.setdefault(reaction.symbol, reaction)

    def get_substance(self, symbol: str) -> Substance:
        try:
            return self._substances[symbol]
        except KeyError:
            raise RecordNotFound("substance", symbol) from None

    def get_reaction(self, symbol: str) -> Reaction:
        try:
            return self._reactions[symbol]
        except KeyError:
            raise RecordNotFound("reaction", symbol) from None

    def contains_substance(self, symbol: str) -> bool:
        return symbol in self._substances

    def contains_reaction(self, symbol: str) -> bool:
        return symbol in self._reactions

    def substances(self) -> List[Substance]:
        return list(self._substances.values())

    def reactions(self) -> List[Reaction]:
        return list(self._reactions.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "substances": [s.to_dict() for s in self._substances.values()],
            "reactions": [r.to_dict() for r in self._reactions.values()],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Database":
        database = cls(
            substances=(Substance.from_dict(item) for item in data.get("substances", [])),
            reactions=(Reaction.from_dict(item) for item in data.get("reactions", [])),
        )
        logger.info(
            f"Loaded {len(database._substances)} substances and "
            f"{len(database._reactions)} reactions"
        )
        return database

    @classmethod
    def from_json(cls, path: str | Path) -> "Database":
        """Load a ``{"substances": [...], "reactions": [...]}`` JSON document."""
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Reading records from {path}")
        return cls.from_dict(data)
