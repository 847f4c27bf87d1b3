"""aqthermo core package."""

from aqthermo.conventions import Conventions
from aqthermo.database import Database
from aqthermo.engine import ThermoEvaluator
from aqthermo.exceptions import (
    AqthermoError,
    CyclicDefinition,
    ReactionNotDefined,
    RecordNotFound,
    UnsupportedMethod,
)
from aqthermo.models import Reaction, Substance
from aqthermo.properties import (
    ElectroPropertiesSolvent,
    PropertiesSolvent,
    ThermoPropertiesReaction,
    ThermoPropertiesSubstance,
)

__all__ = [
    "AqthermoError",
    "Conventions",
    "CyclicDefinition",
    "Database",
    "ElectroPropertiesSolvent",
    "PropertiesSolvent",
    "Reaction",
    "ReactionNotDefined",
    "RecordNotFound",
    "Substance",
    "ThermoEvaluator",
    "ThermoPropertiesReaction",
    "ThermoPropertiesSubstance",
    "UnsupportedMethod",
]
