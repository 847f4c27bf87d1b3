"""Records and stub models shared by the test modules."""

from aqthermo.eos import GEN_EOS, REGISTRY, WATER
from aqthermo.eos.base import SubstanceModel, WaterModel
from aqthermo.models import (
    AggregateState,
    CpInterval,
    MethodCorrP,
    MethodCorrT,
    MethodGenEoS,
    Reaction,
    ReactionReference,
    ReferenceProperties,
    Substance,
    SubstanceClass,
    ThermoCalculationType,
)
from aqthermo.properties import PropertiesSolvent, ThermoPropertiesSubstance


def cp_substance(symbol, gibbs_energy=-1000.0, enthalpy=-900.0, entropy=50.0,
                 cp=30.0, volume=2.0, formula="SiO2", **kwargs):
    return Substance(
        symbol=symbol,
        formula=formula,
        aggregate_state=kwargs.pop("aggregate_state", AggregateState.SOLID),
        method_gen_eos=kwargs.pop("method_gen_eos", MethodGenEoS.CTPM_CPT),
        method_t=kwargs.pop("method_t", MethodCorrT.CTM_CST),
        method_p=kwargs.pop("method_p", MethodCorrP.CPM_NUL),
        reference=ReferenceProperties(
            gibbs_energy=gibbs_energy,
            enthalpy=enthalpy,
            entropy=entropy,
            heat_capacity_cp=cp,
            volume=volume,
        ),
        **kwargs,
    )


QUARTZ = Substance(
    symbol="Quartz",
    formula="SiO2",
    aggregate_state=AggregateState.SOLID,
    method_gen_eos=MethodGenEoS.CTPM_CPT,
    method_t=MethodCorrT.CTM_CST,
    method_p=MethodCorrP.CPM_CON,
    reference=ReferenceProperties(
        gibbs_energy=-856288.0,
        enthalpy=-910700.0,
        entropy=41.46,
        heat_capacity_cp=44.6,
        volume=2.269,
    ),
    cp_intervals=(
        CpInterval(t_min=273.0, t_max=848.0, coefficients=(80.01, -0.00240, -3.546e6, 0.0, 0.0, 0.0, 0.0, 4.915e8)),
    ),
)

HYDROGEN = Substance(
    symbol="H+",
    formula="H+",
    method_gen_eos=MethodGenEoS.CTPM_HKF,
    method_t=MethodCorrT.CTM_HKF,
    method_p=MethodCorrP.CPM_HKF,
)

WATER_SOLVENT = Substance(
    symbol="H2O@",
    formula="H2O@",
    aggregate_state=AggregateState.AQUEOUS,
    substance_class=SubstanceClass.AQSOLVENT,
    method_gen_eos=MethodGenEoS.CTPM_WJNR,
    method_t=MethodCorrT.CTM_WWP,
    method_p=MethodCorrP.CPM_NUL,
)


def reaction(symbol, reactants, log_k=2.0, enthalpy=-5000.0, method_t=MethodCorrT.CTM_EK1,
             method_p=MethodCorrP.CPM_NUL, **kwargs):
    return Reaction(
        symbol=symbol,
        reactants=reactants,
        method_t=method_t,
        method_p=method_p,
        reference=ReactionReference(
            log_k=log_k,
            enthalpy=enthalpy,
            heat_capacity_cp=kwargs.pop("heat_capacity_cp", 0.0),
            volume=kwargs.pop("volume", 0.0),
        ),
        **kwargs,
    )


def reaction_derived(symbol, reaction_symbol, formula="X"):
    return Substance(
        symbol=symbol,
        formula=formula,
        method_gen_eos=MethodGenEoS.CTPM_CPT,
        calculation_type=ThermoCalculationType.REACDC,
        reaction_symbol=reaction_symbol,
    )


class CountingCp(SubstanceModel):
    """Constant properties; counts evaluations per class."""

    calls = 0

    def evaluate(self, temperature, pressure, props, context):
        type(self).calls += 1
        return ThermoPropertiesSubstance(
            gibbs_energy=-1000.0 - temperature,
            enthalpy=-500.0,
            entropy=10.0,
            heat_capacity_cp=20.0,
            heat_capacity_cv=20.0,
            volume=1.0,
            helmholtz_energy=-1000.0,
            internal_energy=-500.0,
        )


class FixedWater(WaterModel):
    """Liquid water with fixed properties."""

    calls = 0
    props = ThermoPropertiesSubstance(
        gibbs_energy=-237181.0,
        enthalpy=-285830.0,
        entropy=69.92,
        heat_capacity_cp=75.3,
        heat_capacity_cv=74.5,
        volume=1.8068,
        helmholtz_energy=-237183.0,
        internal_energy=-285832.0,
    )

    def substance_properties(self, temperature, pressure, state):
        type(self).calls += 1
        return self.props

    def solvent_properties(self, temperature, pressure, state):
        return PropertiesSolvent(
            temperature=temperature,
            pressure=pressure,
            density=997.05,
            density_t=-0.2571,
            density_p=0.04525,
            density_tt=-0.00958,
            alpha=0.2571 / 997.05,
            beta=0.04525 / 997.05,
        )


def stub_registry():
    """Copy of the default registry with the stub models in place."""
    CountingCp.calls = 0
    FixedWater.calls = 0
    registry = REGISTRY.copy()
    registry.register(GEN_EOS, MethodGenEoS.CTPM_CPT)(CountingCp)
    registry.register(WATER, MethodCorrT.CTM_WWP)(FixedWater)
    return registry
