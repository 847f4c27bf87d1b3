"""Method-code dispatch tables, one per model axis."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional, TypeVar

from aqthermo.exceptions import UnsupportedMethod

logger = logging.getLogger(__name__)

GEN_EOS = "generic EoS"
T_CORRECTION = "temperature correction"
P_CORRECTION = "pressure correction"
WATER = "water/steam EoS"
DIELECTRIC = "dielectric"
REACTION_T = "reaction temperature correction"
REACTION_P = "reaction pressure correction"

AXES = (GEN_EOS, T_CORRECTION, P_CORRECTION, WATER, DIELECTRIC, REACTION_T, REACTION_P)

_T = TypeVar("_T", bound=type)


class ModelRegistry:
    """Maps method codes to model classes, separately for every axis.

    A code that maps to ``None`` is an accepted no-op on that axis; a code
    that is absent is unsupported and ``lookup`` raises ``UnsupportedMethod``.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[Optional[Enum], Optional[type]]] = {
            axis: {} for axis in AXES
        }

    def register(self, axis: str, *codes: Enum) -> Callable[[_T], _T]:
        def deco(cls: _T) -> _T:
            for code in codes:
                self._tables[axis][code] = cls
            return cls

        return deco

    def register_no_op(self, axis: str, *codes: Optional[Enum]) -> None:
        for code in codes:
            self._tables[axis][code] = None

    def supports(self, axis: str, code: Optional[Enum]) -> bool:
        return code in self._tables[axis]

    def lookup(self, axis: str, code: Optional[Enum], kind: str, symbol: str) -> Optional[type]:
        """Return the model class for ``code``, or ``None`` for a no-op code.

        Raises:
            UnsupportedMethod: if ``code`` is not registered on ``axis``.
        """
        table = self._tables[axis]
        if code not in table:
            raise UnsupportedMethod(kind, symbol, axis, code)
        model = table[code]
        logger.debug(
            f"{kind} {symbol}: {axis} {getattr(code, 'name', code)} -> "
            f"{model.__name__ if model else 'no-op'}"
        )
        return model

    def copy(self) -> "ModelRegistry":
        clone = ModelRegistry()
        for axis, table in self._tables.items():
            clone._tables[axis] = dict(table)
        return clone


REGISTRY = ModelRegistry()


def register(axis: str, *codes: Enum) -> Callable[[_T], _T]:
    """Register a model class into the default registry."""
    return REGISTRY.register(axis, *codes)
