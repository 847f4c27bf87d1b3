"""Data structures for substance and reaction records."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from aqthermo.constants import P_REFERENCE, T_REFERENCE


class AggregateState(Enum):
    SOLID = "solid"
    LIQUID = "liquid"
    GAS = "gas"
    AQUEOUS = "aqueous"


class SubstanceClass(Enum):
    NORMAL = "normal"
    AQSOLVENT = "aqsolvent"


class ThermoCalculationType(Enum):
    DIRECT = "direct"
    REACDC = "reacdc"


class MethodGenEoS(Enum):
    """General equation-of-state families (and solvent dielectric models)."""

    CTPM_CPT = "CTPM_CPT"  # Cp(T) integration
    CTPM_HKF = "CTPM_HKF"  # HKF aqueous solute, coefficients in cal
    CTPM_HKFR = "CTPM_HKFR"  # HKF aqueous solute, coefficients in SI
    CTPM_WJNR = "CTPM_WJNR"  # Johnson and Norton (1991)
    CTPM_WJNG = "CTPM_WJNG"  # Johnson and Norton (1991)
    CTPM_WSV14 = "CTPM_WSV14"  # Sverjensky et al. (2014)
    CTPM_WF97 = "CTPM_WF97"  # Fernandez et al. (1997)


class MethodCorrT(Enum):
    """Temperature corrections of substances, water models and reaction log K(T) models."""

    CTM_CST = "CTM_CST"  # no correction beyond Cp(T) integration
    CTM_HKF = "CTM_HKF"  # no correction beyond HKF
    CTM_CHP = "CTM_CHP"  # Holland-Powell Landau transition
    CTM_WAT = "CTM_WAT"
    CTM_WAR = "CTM_WAR"
    CTM_WWP = "CTM_WWP"
    CTM_WZD = "CTM_WZD"
    CTM_LGX = "CTM_LGX"
    CTM_LGK = "CTM_LGK"
    CTM_EK0 = "CTM_EK0"
    CTM_EK1 = "CTM_EK1"
    CTM_EK2 = "CTM_EK2"
    CTM_EK3 = "CTM_EK3"
    CTM_DKR = "CTM_DKR"  # Marshall-Franck density model
    CTM_MRB = "CTM_MRB"  # modified Ryzhenko-Bryzgalin
    CTM_IKZ = "CTM_IKZ"  # density interpolation, not implemented


class MethodCorrP(Enum):
    """Pressure corrections of substances and reactions."""

    CPM_OFF = "CPM_OFF"  # ideal gas
    CPM_NUL = "CPM_NUL"
    CPM_CON = "CPM_CON"  # constant molar volume
    CPM_HKF = "CPM_HKF"
    CPM_GAS = "CPM_GAS"  # corresponding-states gas (used to flag water vapor)
    CPM_AKI = "CPM_AKI"  # Akinfiev and Diamond (2003)
    CPM_CEH = "CPM_CEH"  # Murnaghan, Holland and Powell (1998)
    CPM_VBE = "CPM_VBE"  # Berman (1988)
    CPM_VBM = "CPM_VBM"  # Birch-Murnaghan, Gottschalk
    CPM_VKE = "CPM_VKE"  # reaction volume as a function of T
    CPM_CORK = "CPM_CORK"
    CPM_PRSV = "CPM_PRSV"
    CPM_EMP = "CPM_EMP"  # corresponding-states gas fugacity
    CPM_SRK = "CPM_SRK"
    CPM_PR78 = "CPM_PR78"
    CPM_STP = "CPM_STP"  # fixed standard T/P


@dataclass(frozen=True)
class ReferenceProperties:
    """Standard molar properties at the record's reference T and P."""

    gibbs_energy: float = 0.0  # J/mol
    enthalpy: float = 0.0  # J/mol
    entropy: float = 0.0  # J/(mol·K)
    heat_capacity_cp: float = 0.0  # J/(mol·K)
    volume: float = 0.0  # J/bar


@dataclass(frozen=True)
class CpInterval:
    """Cp(T) coefficients valid on [t_min, t_max].

    Cp = a0 + a1 T + a2 / T^2 + a3 / T^0.5 + a4 T^2 + a5 T^3 + a6 T^4
         + a7 / T^3 + a8 / T + a9 T^0.5 + a10 ln T
    """

    t_min: float
    t_max: float
    coefficients: Tuple[float, ...]


@dataclass(frozen=True)
class HKFParameters:
    a1: float
    a2: float
    a3: float
    a4: float
    c1: float
    c2: float
    wref: float


@dataclass(frozen=True)
class LandauParameters:
    tc0: float  # K
    smax: float  # J/(mol·K)
    vmax: float  # J/bar


@dataclass(frozen=True)
class VolumeParameters:
    """Coefficients for the mineral molar volume models.

    Berman (1988): v1..v4. Murnaghan / Birch-Murnaghan: alpha0 (1/K), kappa0
    (bulk modulus, bar), kappa0_prime, dkappa_dt (bar/K).
    """

    v1: float = 0.0
    v2: float = 0.0
    v3: float = 0.0
    v4: float = 0.0
    alpha0: float = 0.0
    kappa0: float = 0.0
    kappa0_prime: float = 4.0
    dkappa_dt: float = 0.0


@dataclass(frozen=True)
class CriticalParameters:
    tc: float  # K
    pc: float  # bar
    omega: float = 0.0
    kappa1: float = 0.0  # PRSV


@dataclass(frozen=True)
class AkinfievDiamondParameters:
    xi: float
    a: float  # cm³/g
    b: float  # cm³·K^0.5/g


@dataclass(frozen=True)
class Substance:
    symbol: str
    name: str = ""
    formula: str = ""
    aggregate_state: AggregateState = AggregateState.AQUEOUS
    substance_class: SubstanceClass = SubstanceClass.NORMAL
    method_gen_eos: Optional[MethodGenEoS] = None
    method_t: Optional[MethodCorrT] = None
    method_p: Optional[MethodCorrP] = None
    calculation_type: ThermoCalculationType = ThermoCalculationType.DIRECT
    reaction_symbol: str = ""
    reference_t: float = T_REFERENCE
    reference_p: float = P_REFERENCE
    charge: float = 0.0
    reference: ReferenceProperties = field(default_factory=ReferenceProperties)
    cp_intervals: Tuple[CpInterval, ...] = ()
    hkf: Optional[HKFParameters] = None
    landau: Optional[LandauParameters] = None
    volume: Optional[VolumeParameters] = None
    critical: Optional[CriticalParameters] = None
    akinfiev_diamond: Optional[AkinfievDiamondParameters] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Substance":
        kwargs = dict(data)
        _coerce_enum(kwargs, "aggregate_state", AggregateState)
        _coerce_enum(kwargs, "substance_class", SubstanceClass)
        _coerce_enum(kwargs, "method_gen_eos", MethodGenEoS)
        _coerce_enum(kwargs, "method_t", MethodCorrT)
        _coerce_enum(kwargs, "method_p", MethodCorrP)
        _coerce_enum(kwargs, "calculation_type", ThermoCalculationType)
        _coerce_block(kwargs, "reference", ReferenceProperties)
        _coerce_block(kwargs, "hkf", HKFParameters)
        _coerce_block(kwargs, "landau", LandauParameters)
        _coerce_block(kwargs, "volume", VolumeParameters)
        _coerce_block(kwargs, "critical", CriticalParameters)
        _coerce_block(kwargs, "akinfiev_diamond", AkinfievDiamondParameters)
        if "cp_intervals" in kwargs:
            kwargs["cp_intervals"] = tuple(
                CpInterval(
                    t_min=float(item["t_min"]),
                    t_max=float(item["t_max"]),
                    coefficients=tuple(float(c) for c in item["coefficients"]),
                )
                for item in kwargs["cp_intervals"]
            )
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass(frozen=True)
class ReactionReference:
    """Standard reaction properties at the reaction's reference T and P."""

    log_k: float = 0.0
    gibbs_energy: float = 0.0  # J/mol
    enthalpy: float = 0.0  # J/mol
    entropy: float = 0.0  # J/(mol·K)
    heat_capacity_cp: float = 0.0  # J/(mol·K)
    volume: float = 0.0  # J/bar


@dataclass(frozen=True)
class DensityModelParameters:
    """log K = A + B/T + C/T^2 + D/T^3 + (E + F/T + G/T^2) log10(rho [g/cm³])"""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0
    g: float = 0.0


@dataclass(frozen=True)
class RyzhenkoBryzgalinParameters:
    zz_over_a: float  # |z+ z-| / a, 1/Å
    a: float
    b: float


@dataclass(frozen=True)
class Reaction:
    symbol: str
    reactants: Mapping[str, float]
    name: str = ""
    method_t: Optional[MethodCorrT] = None
    method_p: Optional[MethodCorrP] = None
    reference_t: float = T_REFERENCE
    reference_p: float = P_REFERENCE
    reference: ReactionReference = field(default_factory=ReactionReference)
    logk_coefficients: Tuple[float, ...] = ()
    dcp_coefficients: Tuple[float, ...] = ()
    volume_coefficients: Tuple[float, ...] = ()
    density_model: Optional[DensityModelParameters] = None
    ryzhenko_bryzgalin: Optional[RyzhenkoBryzgalinParameters] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Reaction":
        kwargs = dict(data)
        kwargs["reactants"] = {str(k): float(v) for k, v in kwargs["reactants"].items()}
        _coerce_enum(kwargs, "method_t", MethodCorrT)
        _coerce_enum(kwargs, "method_p", MethodCorrP)
        _coerce_block(kwargs, "reference", ReactionReference)
        _coerce_block(kwargs, "density_model", DensityModelParameters)
        _coerce_block(kwargs, "ryzhenko_bryzgalin", RyzhenkoBryzgalinParameters)
        for name in ("logk_coefficients", "dcp_coefficients", "volume_coefficients"):
            if name in kwargs:
                kwargs[name] = tuple(float(c) for c in kwargs[name])
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


def _coerce_enum(kwargs: dict, name: str, enum_type: type) -> None:
    value = kwargs.get(name)
    if value is not None and not isinstance(value, enum_type):
        kwargs[name] = enum_type(value)


def _coerce_block(kwargs: dict, name: str, block_type: type) -> None:
    value = kwargs.get(name)
    if isinstance(value, Mapping):
        known = {f.name for f in fields(block_type)}
        kwargs[name] = block_type(**{k: float(v) for k, v in value.items() if k in known})


def _record_to_dict(record: Any) -> dict:
    def convert(value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, dict):
            return {k: convert(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [convert(v) for v in value]
        return value

    data = asdict(record)
    if isinstance(record, Reaction):
        data["reactants"] = dict(record.reactants)
    return {k: convert(v) for k, v in data.items() if v is not None}
