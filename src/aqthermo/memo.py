"""Memoization of ``(T, P, symbol)`` entry points."""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

_R = TypeVar("_R")


def memoize(fn: Callable[[float, float, str], _R]) -> Callable[[float, float, str], _R]:
    """Cache ``fn`` on the bit patterns of ``T`` and ``P`` and on ``symbol``.

    Plain float equality would merge ``0.0`` with ``-0.0``, so the temperature
    and pressure are keyed by ``float.hex``. That representation round-trips
    exactly, and ``fn`` receives the same values it was called with (as
    floats). The cache is unbounded and lives as long as the returned
    wrapper; the wrapper exposes ``cache_info()`` and ``cache_clear()``.
    Calls that raise are not cached.
    """

    @functools.lru_cache(maxsize=None)
    def cached(temperature_key: str, pressure_key: str, symbol: str) -> _R:
        return fn(float.fromhex(temperature_key), float.fromhex(pressure_key), symbol)

    @functools.wraps(fn)
    def wrapper(temperature: float, pressure: float, symbol: str) -> _R:
        return cached(float(temperature).hex(), float(pressure).hex(), symbol)

    wrapper.cache_info = cached.cache_info
    wrapper.cache_clear = cached.cache_clear
    return wrapper
