"""CSV export of evaluated states."""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Sequence

from aqthermo.properties import PropertiesSolvent, ThermoPropertiesSubstance

logger = logging.getLogger(__name__)

HEADER: Sequence[str] = ("T", "P", "Cp", "Cv", "RHO", "H", "S", "G", "A", "U", "V")


def state_row(
    temperature: float,
    pressure: float,
    props: ThermoPropertiesSubstance,
    density: float = 0.0,
) -> list:
    return [
        temperature,
        pressure,
        props.heat_capacity_cp,
        props.heat_capacity_cv,
        density,
        props.enthalpy,
        props.entropy,
        props.gibbs_energy,
        props.helmholtz_energy,
        props.internal_energy,
        props.volume,
    ]


def append_state_row(
    path: str | Path,
    temperature: float,
    pressure: float,
    props: ThermoPropertiesSubstance,
    solvent: PropertiesSolvent | None = None,
) -> None:
    """Append one ``T,P,Cp,Cv,RHO,H,S,G,A,U,V`` row to ``path``.

    The header is written only when the file is missing or empty. Floats are
    written with ``repr`` so that they read back to the same value.
    """
    path = Path(path)
    write_header = not path.exists() or path.stat().st_size == 0
    density = solvent.density if solvent is not None else 0.0
    row = state_row(temperature, pressure, props, density)
    with open(path, "a", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        if write_header:
            writer.writerow(HEADER)
        writer.writerow([repr(float(value)) for value in row])
    logger.debug(f"Appended state T={temperature} P={pressure} to {path}")
