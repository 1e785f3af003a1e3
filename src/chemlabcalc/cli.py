"""Command-line entrypoints for ChemLabCalc."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from chemlabcalc.analysis import CompoundAnalyzer
from chemlabcalc.errors import DivisionByZero, FormulaError
from chemlabcalc.formula import REASON_MESSAGES, check_formula, expand, require_valid

app = typer.Typer(add_completion=False)


def _fail(exc: FormulaError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=2 if isinstance(exc, DivisionByZero) else 1)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Chemical formula calculator."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def analyze(
    formula: Annotated[str, typer.Argument(help="Chemical formula, e.g. Ca(OH)2.")],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Molar mass, compound class, equivalent weight and density of a formula."""
    try:
        result = CompoundAnalyzer().analyze(formula)
    except FormulaError as exc:
        _fail(exc)

    json_output = json.dumps(result.as_dict(), indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)


@app.command()
def validate(
    formula: Annotated[str, typer.Argument(help="Chemical formula to check.")],
) -> None:
    """Check formula syntax and element symbols."""
    reason = check_formula(formula)
    if reason is None:
        typer.echo("valid")
        return
    typer.echo(f"invalid: {REASON_MESSAGES[reason]}")
    raise typer.Exit(code=1)


@app.command("expand")
def expand_command(
    formula: Annotated[str, typer.Argument(help="Chemical formula with parentheses.")],
) -> None:
    """Print the formula with every parenthesized group distributed."""
    try:
        require_valid(formula)
        typer.echo(expand(formula))
    except FormulaError as exc:
        _fail(exc)


@app.command()
def density(
    formula: Annotated[str, typer.Argument(help="Chemical formula.")],
    molar_mass: Annotated[
        float | None,
        typer.Option(help="Molar mass (g/mol); computed from the formula if omitted."),
    ] = None,
) -> None:
    """Reference or estimated density (g/mL)."""
    analyzer = CompoundAnalyzer()
    try:
        require_valid(formula)
        if molar_mass is None:
            molar_mass = analyzer.molar_mass(formula)
        estimate = analyzer.estimate_density(formula, molar_mass)
    except FormulaError as exc:
        _fail(exc)

    typer.echo(
        json.dumps(
            {"formula": formula, "density": estimate.value, "source": estimate.source},
            indent=2,
        )
    )
