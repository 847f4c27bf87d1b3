"""Property models and the method-code dispatch tables.

Importing this package registers every model into ``REGISTRY``.
"""

from aqthermo.eos import (  # noqa: F401
    akinfiev_diamond,
    cp_integration,
    dielectric,
    gases,
    hkf,
    landau,
    minerals,
    reaction_density,
    reaction_logk,
    reaction_volume,
    water,
)
from aqthermo.eos.registry import (
    DIELECTRIC,
    GEN_EOS,
    P_CORRECTION,
    REACTION_P,
    REACTION_T,
    REGISTRY,
    T_CORRECTION,
    WATER,
    ModelRegistry,
    register,
)
from aqthermo.models import MethodCorrP, MethodCorrT

REGISTRY.register_no_op(T_CORRECTION, None, MethodCorrT.CTM_CST, MethodCorrT.CTM_HKF)
REGISTRY.register_no_op(P_CORRECTION, None, MethodCorrP.CPM_NUL, MethodCorrP.CPM_HKF)
REGISTRY.register_no_op(REACTION_P, None, MethodCorrP.CPM_NUL, MethodCorrP.CPM_CON)

__all__ = [
    "DIELECTRIC",
    "GEN_EOS",
    "P_CORRECTION",
    "REACTION_P",
    "REACTION_T",
    "REGISTRY",
    "T_CORRECTION",
    "WATER",
    "ModelRegistry",
    "register",
]
