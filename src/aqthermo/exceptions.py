"""Exception types raised while evaluating thermodynamic properties."""

from __future__ import annotations

from typing import Sequence


class AqthermoError(RuntimeError):
    """Base class for errors raised by the evaluation engine."""


class RecordNotFound(AqthermoError, KeyError):
    """Raised when a substance or reaction symbol is absent from the record store."""

    def __init__(self, kind: str, symbol: str) -> None:
        self.kind = kind
        self.symbol = symbol
        super().__init__(
            f"Cannot get an instance of the {kind} `{symbol}` in the database: "
            f"there is no such {kind} in the database."
        )

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ReactionNotDefined(AqthermoError):
    """Raised when a reaction-derived substance has no usable defining reaction."""

    def __init__(self, symbol: str, reason: str = "no reaction symbol is set") -> None:
        self.symbol = symbol
        super().__init__(
            f"Cannot calculate the properties of substance `{symbol}` from its "
            f"defining reaction: {reason}."
        )


class UnsupportedMethod(AqthermoError):
    """Raised when a declared method code has no model registered on the required axis."""

    def __init__(self, kind: str, symbol: str, axis: str, code: object) -> None:
        self.kind = kind
        self.symbol = symbol
        self.axis = axis
        self.code = code
        name = getattr(code, "name", code)
        super().__init__(
            f"No {axis} model is implemented for method `{name}` of {kind} `{symbol}`."
        )


class CyclicDefinition(AqthermoError):
    """Raised when evaluating a record re-enters a computation that is still in flight."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(
            "Cyclic record definition detected: " + " -> ".join(self.chain)
        )


class MissingElementData(AqthermoError):
    """Raised when the Berman-Brown convention needs the entropy of an element with no tabulated value."""

    def __init__(self, element: str, symbol: str = "") -> None:
        self.element = element
        self.symbol = symbol
        owner = f" of substance `{symbol}`" if symbol else ""
        super().__init__(
            f"No standard entropy is tabulated for element `{element}`{owner}."
        )


class PhaseNotAvailable(AqthermoError):
    """Raised when a water model cannot evaluate the requested phase at the given state."""

    def __init__(self, symbol: str, temperature: float, pressure: float, state: object) -> None:
        self.symbol = symbol
        self.temperature = temperature
        self.pressure = pressure
        self.state = state
        name = getattr(state, "name", state)
        super().__init__(
            f"Cannot evaluate `{symbol}` as {name} at T={temperature} K, "
            f"P={pressure} bar: the phase is not available there."
        )
