"""Chemical formula parsing and elemental entropies.

Formulas follow the notation used by the thermodynamic databases this package
reads: element symbols with optional counts (``Mg0.5``), nested parentheses
(``Al(OH)4-``), valence annotations between bars (``Fe|3|+3``), a trailing
charge (``+``, ``-2``) and an optional ``@`` marking an aqueous species. The
charge is reported under the pseudo-element ``"Zz"``.
"""

from __future__ import annotations

import logging
import re
from collections import defaultdict
from typing import Dict, Mapping, Tuple

from aqthermo.exceptions import MissingElementData

logger = logging.getLogger(__name__)

CHARGE_ELEMENT = "Zz"

_ELEMENT_RE = re.compile(
    r"(?P<element>[A-Z][a-z]?)(?:\|(?P<valence>[+-]?\d+)\|)?(?P<count>\d+(?:\.\d+)?)?"
)
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_CHARGE_RE = re.compile(r"(?P<sign>[+-])(?P<magnitude>\d+(?:\.\d+)?)?$")

# Standard entropies of the elements at 298.15 K and 1 bar, per atom, J/(mol·K),
# in their reference forms (Robie and Hemingway, 1995; CODATA).
# Diatomic gases are listed per atom (half of the molecular value).
ELEMENT_ENTROPIES: Dict[str, float] = {
    "H": 65.34, "He": 126.15, "Li": 29.12, "Be": 9.50, "B": 5.90,
    "C": 5.74, "N": 95.80, "O": 102.57, "F": 101.40, "Ne": 146.33,
    "Na": 51.30, "Mg": 32.67, "Al": 28.30, "Si": 18.81, "P": 41.09,
    "S": 32.05, "Cl": 111.54, "Ar": 154.85, "K": 64.68, "Ca": 41.59,
    "Sc": 34.64, "Ti": 30.72, "V": 28.91, "Cr": 23.62, "Mn": 32.01,
    "Fe": 27.09, "Co": 30.04, "Ni": 29.87, "Cu": 33.15, "Zn": 41.63,
    "Ga": 40.83, "Ge": 31.09, "As": 35.69, "Se": 42.27, "Br": 76.11,
    "Kr": 164.08, "Rb": 76.78, "Sr": 55.69, "Y": 44.43, "Zr": 38.87,
    "Nb": 36.40, "Mo": 28.66, "Ru": 28.53, "Rh": 31.51, "Pd": 37.57,
    "Ag": 42.55, "Cd": 51.80, "In": 57.82, "Sn": 51.18, "Sb": 45.69,
    "Te": 49.71, "I": 58.07, "Xe": 169.68, "Cs": 85.23, "Ba": 62.42,
    # lanthanides
    "La": 56.90, "Ce": 72.00, "Pr": 73.20, "Nd": 71.50, "Sm": 69.60,
    "Eu": 77.78, "Gd": 68.07, "Tb": 73.22, "Dy": 74.77, "Ho": 75.30,
    "Er": 73.18, "Tm": 74.01, "Yb": 59.87, "Lu": 50.96,
    "Hf": 43.56, "Ta": 41.51, "W": 32.64, "Re": 36.86, "Os": 32.64,
    "Ir": 35.48, "Pt": 41.63, "Au": 47.49, "Hg": 75.90, "Tl": 64.18,
    "Pb": 64.80, "Bi": 56.74, "Rn": 176.21, "Ra": 71.00,
    # actinides
    "Ac": 56.50, "Th": 51.80, "Pa": 51.90, "U": 50.20, "Np": 50.46,
    "Pu": 54.46, "Am": 55.40,
    CHARGE_ELEMENT: 0.0,
}


def parse_formula(formula: str) -> Dict[str, float]:
    """Return the element -> count mapping of ``formula``.

    Raises:
        ValueError: if the formula is empty, has unbalanced parentheses or
            contains characters that are not part of the notation.
    """
    text = formula.strip()
    if text.endswith("@"):
        text = text[:-1]
    if not text:
        raise ValueError(f"Empty chemical formula `{formula}`")

    charge = 0.0
    match = _CHARGE_RE.search(text)
    if match and match.start() > 0:
        magnitude = float(match.group("magnitude") or 1.0)
        charge = magnitude if match.group("sign") == "+" else -magnitude
        text = text[: match.start()]

    counts, position = _parse_group(text, 0, formula)
    if position != len(text):
        raise ValueError(f"Unbalanced parentheses in formula `{formula}`")
    if charge:
        counts[CHARGE_ELEMENT] = counts.get(CHARGE_ELEMENT, 0.0) + charge
    return dict(counts)


def _parse_group(text: str, position: int, formula: str) -> Tuple[Dict[str, float], int]:
    counts: Dict[str, float] = defaultdict(float)
    while position < len(text):
        char = text[position]
        if char == "(":
            inner, position = _parse_group(text, position + 1, formula)
            if position >= len(text) or text[position] != ")":
                raise ValueError(f"Unbalanced parentheses in formula `{formula}`")
            position += 1
            multiplier = 1.0
            number = _NUMBER_RE.match(text, position)
            if number:
                multiplier = float(number.group())
                position = number.end()
            for element, count in inner.items():
                counts[element] += count * multiplier
        elif char == ")":
            return counts, position
        else:
            match = _ELEMENT_RE.match(text, position)
            if match is None:
                raise ValueError(
                    f"Unexpected character {char!r} at position {position} "
                    f"in formula `{formula}`"
                )
            count = match.group("count")
            counts[match.group("element")] += float(count) if count else 1.0
            position = match.end()
    return counts, position


def elemental_entropy(formula: str | Mapping[str, float]) -> float:
    """Sum of the standard entropies of the elements in ``formula`` (J/(mol·K)).

    Raises:
        MissingElementData: if an element has no tabulated entropy.
    """
    elements = parse_formula(formula) if isinstance(formula, str) else formula
    total = 0.0
    for element, count in elements.items():
        try:
            total += count * ELEMENT_ENTROPIES[element]
        except KeyError:
            raise MissingElementData(element) from None
    logger.debug(f"elemental entropy of {dict(elements)}: {total}")
    return total
