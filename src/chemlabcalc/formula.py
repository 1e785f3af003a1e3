"""Formula tokenizing, validation and parenthesis expansion.

Formulas are read with a small grammar:

    formula := (element | group | <skipped char>)*
    element := [A-Z][a-z]? count?
    group   := "(" formula ")" count?
    count   := decimal number, 1 when absent

Groups are parsed with an explicit stack into a ``FormulaGroup`` tree and
flattened by multiplying each member count by the enclosing multipliers.
Counts are kept as ``Fraction`` so that expansion is exact. Characters that
match none of the rules (stray digits, stray lowercase letters) are skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Sequence, Union

from chemlabcalc.constants import (
    BIOMASS_PATTERN,
    ELEMENT_TOKEN_PATTERN,
    FORMULA_CHARSET_PATTERN,
    GROUP_MULTIPLIER_PATTERN,
)
from chemlabcalc.elements import PERIODIC_TABLE, ElementTable
from chemlabcalc.errors import ComputationError, InvalidFormula
from chemlabcalc.models import FormulaToken

logger = logging.getLogger(__name__)

# Rejection reasons reported by ``check_formula``.
REASON_EMPTY = "empty"
REASON_CHARACTERS = "characters"
REASON_PARENTHESES = "parentheses"
REASON_UNKNOWN_ELEMENT = "unknown_element"
REASON_NO_ELEMENTS = "no_elements"

REASON_MESSAGES = {
    REASON_EMPTY: "Formula is empty",
    REASON_CHARACTERS: "Formula contains characters outside [A-Za-z0-9().]",
    REASON_PARENTHESES: "Formula has unbalanced parentheses",
    REASON_UNKNOWN_ELEMENT: "Formula references an unknown element",
    REASON_NO_ELEMENTS: "Formula contains no element symbols",
}


@dataclass(frozen=True)
class FormulaGroup:
    members: tuple[Union[FormulaToken, "FormulaGroup"], ...]
    multiplier: Fraction = Fraction(1)

    def flatten(self, factor: Fraction = Fraction(1)) -> list[FormulaToken]:
        scale = factor * self.multiplier
        tokens: list[FormulaToken] = []
        for member in self.members:
            if isinstance(member, FormulaGroup):
                tokens.extend(member.flatten(scale))
            else:
                tokens.append(FormulaToken(member.element, member.count * scale))
        return tokens


def parse_count(text: str, formula: str | None = None) -> Fraction:
    """Parse a subscript or multiplier; an empty string means 1."""
    if not text:
        return Fraction(1)
    try:
        return Fraction(text)
    except ValueError as exc:
        raise ComputationError(f"Invalid count {text!r}", formula) from exc


def count_as_float(count: Fraction, formula: str | None = None) -> float:
    try:
        return float(count)
    except OverflowError as exc:
        raise ComputationError(f"Count {count} is too large", formula) from exc


def match_biomass(formula: str) -> tuple[Fraction, Fraction, Fraction] | None:
    """Return the (h, o, n) subscripts of a ``CH(h)O(o)N(n)`` formula, else None."""
    match = BIOMASS_PATTERN.match(formula)
    if match is None:
        return None
    h, o, n = (Fraction(group) for group in match.groups())
    return h, o, n


def is_biomass(formula: str) -> bool:
    return BIOMASS_PATTERN.match(formula) is not None


def tokenize(formula: str) -> list[FormulaToken]:
    """Read element tokens left to right, ignoring parentheses and multipliers."""
    return [
        FormulaToken(match.group(1), parse_count(match.group(2), formula))
        for match in ELEMENT_TOKEN_PATTERN.finditer(formula)
    ]


def parse_formula(formula: str) -> FormulaGroup:
    """Parse ``formula`` into a tree of groups and element tokens."""
    stack: list[list[Union[FormulaToken, FormulaGroup]]] = [[]]
    position = 0
    while position < len(formula):
        char = formula[position]
        if char == "(":
            stack.append([])
            position += 1
        elif char == ")":
            if len(stack) == 1:
                raise InvalidFormula(
                    REASON_MESSAGES[REASON_PARENTHESES], formula, reason=REASON_PARENTHESES
                )
            members = stack.pop()
            multiplier = GROUP_MULTIPLIER_PATTERN.match(formula, position + 1)
            stack[-1].append(
                FormulaGroup(tuple(members), parse_count(multiplier.group(), formula))
            )
            position = multiplier.end()
        else:
            match = ELEMENT_TOKEN_PATTERN.match(formula, position)
            if match is None:
                position += 1
                continue
            stack[-1].append(FormulaToken(match.group(1), parse_count(match.group(2), formula)))
            position = match.end()

    if len(stack) != 1:
        raise InvalidFormula(
            REASON_MESSAGES[REASON_PARENTHESES], formula, reason=REASON_PARENTHESES
        )
    return FormulaGroup(tuple(stack[0]))


def flatten_formula(formula: str) -> list[FormulaToken]:
    return parse_formula(formula).flatten()


def format_count(count: Fraction) -> str:
    if count.denominator == 1:
        return str(count.numerator)
    return format(Decimal(count.numerator) / Decimal(count.denominator), "f")


def render_tokens(tokens: Iterable[FormulaToken]) -> str:
    """Write tokens back out with explicit counts, e.g. ``Ca1O2H2``."""
    return "".join(f"{token.element}{format_count(token.count)}" for token in tokens)


def expand(formula: str) -> str:
    """Remove every parenthesized group by distributing its multiplier.

    Parenthesis-free input is returned unchanged; otherwise every token is
    written with an explicit count in its original order, so expanding an
    expanded formula is a no-op.

    >>> expand("Al2(SO4)3")
    'Al2S3O12'
    """
    if "(" not in formula and ")" not in formula:
        return formula
    expanded = render_tokens(flatten_formula(formula))
    logger.debug("Expanded %s -> %s", formula, expanded)
    return expanded


def aggregate_tokens(tokens: Sequence[FormulaToken]) -> dict[str, Fraction]:
    """Total count per element, in order of first appearance."""
    totals: dict[str, Fraction] = {}
    for token in tokens:
        totals[token.element] = totals.get(token.element, Fraction(0)) + token.count
    return totals


def check_formula(formula: str, table: ElementTable = PERIODIC_TABLE) -> str | None:
    """Return the first failed acceptance check for ``formula``, or None if accepted."""
    if not isinstance(formula, str) or not formula:
        return REASON_EMPTY
    if is_biomass(formula):
        return None
    if not FORMULA_CHARSET_PATTERN.match(formula):
        return REASON_CHARACTERS

    depth = 0
    for char in formula:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return REASON_PARENTHESES
    if depth != 0:
        return REASON_PARENTHESES

    found = False
    for match in ELEMENT_TOKEN_PATTERN.finditer(formula):
        if match.group(1) not in table:
            return REASON_UNKNOWN_ELEMENT
        found = True
    return None if found else REASON_NO_ELEMENTS


def validate_formula(formula: str, table: ElementTable = PERIODIC_TABLE) -> bool:
    """Syntactic acceptance check. Never raises."""
    reason = check_formula(formula, table)
    if reason is not None:
        logger.debug("Rejected formula %r: %s", formula, reason)
        return False
    return True


def require_valid(formula: str, table: ElementTable = PERIODIC_TABLE) -> None:
    """Raise ``InvalidFormula`` carrying the first failed check."""
    reason = check_formula(formula, table)
    if reason is not None:
        logger.debug("Rejected formula %r: %s", formula, reason)
        raise InvalidFormula(REASON_MESSAGES[reason], formula, reason=reason)
