"""Reference-state conventions applied to evaluated substance properties."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from aqthermo.constants import A_TRIPLE, G_TRIPLE, H_TRIPLE, S_TRIPLE, U_TRIPLE
from aqthermo.exceptions import MissingElementData
from aqthermo.formula import elemental_entropy
from aqthermo.properties import ThermoPropertiesSubstance

logger = logging.getLogger(__name__)

BENSON_HELGESON = "Benson-Helgeson"
BERMAN_BROWN = "Berman-Brown"
WATER_DEFAULT = "default"
STEAM_TABLES = "steam-tables"

AQUEOUS_CONVENTIONS = (BENSON_HELGESON, BERMAN_BROWN)
WATER_CONVENTIONS = (WATER_DEFAULT, STEAM_TABLES)


@dataclass(frozen=True)
class Conventions:
    """Which zero-reference conventions an evaluator reports results in.

    ``aqueous`` applies to every non-solvent substance: ``Benson-Helgeson``
    (apparent properties of formation from the elements, the native scale of
    the models) or ``Berman-Brown`` (apparent properties referenced to the
    elements at the record's reference temperature). ``water`` applies to the
    solvent: ``default`` or ``steam-tables`` (zero internal energy and entropy
    of liquid water at the triple point).
    """

    aqueous: str = BENSON_HELGESON
    water: str = WATER_DEFAULT

    def __post_init__(self) -> None:
        if self.aqueous not in AQUEOUS_CONVENTIONS:
            raise ValueError(
                f"Unknown aqueous convention `{self.aqueous}`; "
                f"expected one of {', '.join(AQUEOUS_CONVENTIONS)}"
            )
        if self.water not in WATER_CONVENTIONS:
            raise ValueError(
                f"Unknown water convention `{self.water}`; "
                f"expected one of {', '.join(WATER_CONVENTIONS)}"
            )


def to_steam_tables(props: ThermoPropertiesSubstance) -> ThermoPropertiesSubstance:
    """Shift solvent properties by the Helgeson and Kirkham (1974) triple-point values."""
    return replace(
        props,
        gibbs_energy=props.gibbs_energy - G_TRIPLE,
        enthalpy=props.enthalpy - H_TRIPLE,
        entropy=props.entropy - S_TRIPLE,
        helmholtz_energy=props.helmholtz_energy - A_TRIPLE,
        internal_energy=props.internal_energy - U_TRIPLE,
    )


def to_berman_brown(
    props: ThermoPropertiesSubstance, formula: str, reference_t: float, symbol: str = ""
) -> ThermoPropertiesSubstance:
    """Subtract ``Tr * S(elements)`` from the Gibbs energy and enthalpy.

    Raises:
        MissingElementData: naming ``symbol`` when an element of ``formula``
            has no tabulated entropy.
    """
    try:
        offset = reference_t * elemental_entropy(formula)
    except MissingElementData as error:
        raise MissingElementData(error.element, symbol) from None
    return replace(
        props,
        gibbs_energy=props.gibbs_energy - offset,
        enthalpy=props.enthalpy - offset,
    )
