"""Command-line entrypoints for aqthermo."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, NoReturn

import numpy as np
import typer

from aqthermo.config import load_config
from aqthermo.exceptions import AqthermoError
from aqthermo.export import append_state_row
from aqthermo.formula import parse_formula

app = typer.Typer(add_completion=False)

ConfigArgument = Annotated[Path, typer.Argument(help="Path to JSON configuration file.")]
TemperatureOption = Annotated[float, typer.Option("--temperature", "-T", help="Temperature (K).")]
PressureOption = Annotated[
    float, typer.Option("--pressure", "-P", help="Pressure (bar); 0 for saturation.")
]


@app.callback()
def main(
    log_level: Annotated[str, typer.Option(help="Logging level.")] = "WARNING",
) -> None:
    """Standard thermodynamic properties of substances, water and reactions."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _emit(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _fail(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.command()
def substance(
    config_file: ConfigArgument,
    symbol: Annotated[str, typer.Argument(help="Substance symbol.")],
    temperature: TemperatureOption = 298.15,
    pressure: PressureOption = 1.0,
) -> None:
    """Print the standard properties of a substance."""
    try:
        evaluator = load_config(config_file).build_evaluator()
        props = evaluator.substance_properties(temperature, pressure, symbol)
    except (AqthermoError, ValueError) as error:
        _fail(error)
    _emit({"symbol": symbol, "T": temperature, "P": pressure, **props.values()})


@app.command()
def reaction(
    config_file: ConfigArgument,
    symbol: Annotated[str, typer.Argument(help="Reaction symbol.")],
    temperature: TemperatureOption = 298.15,
    pressure: PressureOption = 1.0,
    from_reactants: Annotated[
        bool, typer.Option(help="Sum the reactant properties instead of the reaction models.")
    ] = False,
) -> None:
    """Print the standard properties of a reaction."""
    try:
        evaluator = load_config(config_file).build_evaluator()
        if from_reactants:
            props = evaluator.reaction_properties_from_reactants(temperature, pressure, symbol)
        else:
            props = evaluator.reaction_properties(temperature, pressure, symbol)
    except (AqthermoError, ValueError) as error:
        _fail(error)
    payload = {"symbol": symbol, "T": temperature, "P": pressure, **props.values()}
    if props.status:
        payload["status"] = dict(props.status)
    _emit(payload)


@app.command()
def solvent(
    config_file: ConfigArgument,
    temperature: TemperatureOption = 298.15,
    pressure: PressureOption = 1.0,
    electro: Annotated[
        bool, typer.Option(help="Print the dielectric properties and Born functions.")
    ] = False,
) -> None:
    """Print the bulk (or dielectric) properties of the configured solvent."""
    try:
        evaluator = load_config(config_file).build_evaluator()
        if electro:
            props = evaluator.electro_solvent_properties(temperature, pressure)
        else:
            props = evaluator.solvent_properties(temperature, pressure)
    except (AqthermoError, ValueError) as error:
        _fail(error)
    _emit({"symbol": evaluator.solvent_symbol, "T": temperature, "P": pressure, **props.values()})


@app.command()
def sweep(
    config_file: ConfigArgument,
    symbol: Annotated[str, typer.Argument(help="Substance symbol.")],
    csv: Annotated[Path, typer.Option(help="CSV file the rows are appended to.")],
    t_start: Annotated[float, typer.Option(help="First temperature (K).")] = 298.15,
    t_stop: Annotated[float, typer.Option(help="Last temperature (K).")] = 573.15,
    points: Annotated[int, typer.Option(help="Number of temperatures.")] = 12,
    pressure: PressureOption = 1.0,
) -> None:
    """Evaluate a substance along an isobar and append the states to a CSV file."""
    try:
        evaluator = load_config(config_file).build_evaluator()
        solvent_symbol = evaluator.solvent_symbol
        for temperature in np.linspace(t_start, t_stop, points):
            t = float(temperature)
            props = evaluator.substance_properties(t, pressure, symbol)
            water = None
            if symbol == solvent_symbol:
                water = evaluator.solvent_properties(t, pressure)
            append_state_row(csv, t, pressure, props, water)
    except (AqthermoError, ValueError) as error:
        _fail(error)
    typer.echo(f"Wrote {points} rows to {csv}")


@app.command()
def formula(
    text: Annotated[str, typer.Argument(help="Chemical formula, e.g. Al(OH)4-")],
) -> None:
    """Print the element counts of a chemical formula."""
    try:
        elements = parse_formula(text)
    except ValueError as error:
        _fail(error)
    _emit(elements)
