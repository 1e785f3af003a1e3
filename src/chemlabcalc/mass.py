"""Molar mass from element tokens or formula strings."""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence

import numpy as np

from chemlabcalc.elements import PERIODIC_TABLE, ElementTable
from chemlabcalc.errors import ComputationError, UnknownElement
from chemlabcalc.formula import count_as_float, expand, match_biomass, tokenize
from chemlabcalc.models import FormulaToken


def molar_mass_of_tokens(
    tokens: Sequence[FormulaToken],
    table: ElementTable = PERIODIC_TABLE,
    formula: str | None = None,
) -> float:
    """Sum ``count * atomic mass`` over ``tokens``.

    Raises:
        UnknownElement: A token symbol is missing from ``table``.
        ComputationError: The total is not a finite positive number.
    """
    counts = np.zeros(len(tokens))
    masses = np.zeros(len(tokens))
    for index, token in enumerate(tokens):
        if token.element not in table:
            raise UnknownElement(token.element, formula)
        counts[index] = count_as_float(token.count, formula)
        masses[index] = table.mass(token.element)

    with np.errstate(over="ignore", invalid="ignore"):
        total = float(np.dot(counts, masses))
    if not np.isfinite(total):
        raise ComputationError(f"Molar mass is not finite ({total})", formula)
    if total <= 0.0:
        raise ComputationError("Molar mass must be positive", formula)
    return total


def biomass_molar_mass(
    h: Fraction,
    o: Fraction,
    n: Fraction,
    table: ElementTable = PERIODIC_TABLE,
    formula: str | None = None,
) -> float:
    """Molar mass of ``CH(h)O(o)N(n)``; carbon is fixed at one mole."""
    tokens = [
        FormulaToken("C", Fraction(1)),
        FormulaToken("H", h),
        FormulaToken("O", o),
        FormulaToken("N", n),
    ]
    return molar_mass_of_tokens(tokens, table, formula)


def molar_mass(formula: str, table: ElementTable = PERIODIC_TABLE) -> float:
    """Molar mass (g/mol) of a raw or already expanded formula."""
    biomass = match_biomass(formula)
    if biomass is not None:
        return biomass_molar_mass(*biomass, table=table, formula=formula)
    return molar_mass_of_tokens(tokenize(expand(formula)), table, formula)
