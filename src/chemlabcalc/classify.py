"""Compound classification for equivalent-weight calculations.

Classification runs in three stages, first match wins:

1. Empirical biomass formulas ``CH(h)O(o)N(n)`` are ``Biomass``.
2. Exact formula match in the curated reagent table.
3. A structural heuristic over the raw (unexpanded) element tokens.

The heuristic reads tokens without interpreting parentheses, so a group
multiplier such as the ``2`` in ``Mg(OH)2`` does not scale the counts. Any
formula with hydrogen is an acid; hydroxides are only recognised as bases
through the reagent table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from chemlabcalc.formula import count_as_float, is_biomass, tokenize
from chemlabcalc.models import Acid, Biomass, CompoundClass, FormulaToken, Oxidation, Salt
from chemlabcalc.reference import KNOWN_COMPOUNDS, METALS, TYPICAL_VALENCES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ElementProfile:
    """Element-category totals aggregated from a token list."""

    hydrogens: float = 0.0
    oxygens: float = 0.0
    metals: float = 0.0
    non_metals: float = 0.0
    metal_valence: float = 0.0
    non_metal_valence: float = 0.0


def profile_tokens(
    tokens: Sequence[FormulaToken],
    metals: frozenset[str] = METALS,
    valences: Mapping[str, int] = TYPICAL_VALENCES,
    formula: str | None = None,
) -> ElementProfile:
    hydrogens = oxygens = metal_count = non_metals = 0.0
    metal_valence = non_metal_valence = 0.0
    for token in tokens:
        count = count_as_float(token.count, formula)
        if token.element == "H":
            hydrogens += count
        elif token.element == "O":
            oxygens += count
            non_metals += count
            non_metal_valence = max(non_metal_valence, valences.get("O", 2))
        elif token.element in metals:
            metal_count += count
            metal_valence = max(metal_valence, valences.get(token.element, 1))
        else:
            non_metals += count
            non_metal_valence = max(non_metal_valence, valences.get(token.element, 1))
    return ElementProfile(
        hydrogens=hydrogens,
        oxygens=oxygens,
        metals=metal_count,
        non_metals=non_metals,
        metal_valence=metal_valence,
        non_metal_valence=non_metal_valence,
    )


def classify_profile(profile: ElementProfile) -> CompoundClass:
    """Decision tree over element-category totals."""
    if profile.hydrogens > 0:
        # Oxyacids and hydracids share the same rule.
        return Acid(hydrogens=profile.hydrogens)
    if profile.metals > 0:
        if profile.oxygens > 0:
            # Metal oxides and oxysalts (Na2O, ZnSO4).
            return Salt(valence=profile.metal_valence)
        return Oxidation(valence=profile.metal_valence)
    if profile.oxygens > 0:
        return Oxidation(oxidation=profile.oxygens)
    if profile.non_metals > 0:
        return Oxidation(valence=profile.non_metal_valence)
    highest = max(profile.metal_valence, profile.non_metal_valence, profile.hydrogens)
    return Oxidation(valence=highest or 1)


def lookup_compound(
    formula: str, known: Mapping[str, CompoundClass] = KNOWN_COMPOUNDS
) -> CompoundClass | None:
    return known.get(formula)


def classify(
    formula: str,
    known: Mapping[str, CompoundClass] = KNOWN_COMPOUNDS,
    metals: frozenset[str] = METALS,
    valences: Mapping[str, int] = TYPICAL_VALENCES,
) -> CompoundClass:
    """Classify ``formula``; raises ``ComputationError`` on an unparsable or oversized count."""
    if is_biomass(formula):
        logger.debug("%s classified as biomass", formula)
        return Biomass()

    known_class = lookup_compound(formula, known)
    if known_class is not None:
        logger.debug("%s classified from reagent table: %s", formula, known_class)
        return known_class

    profile = profile_tokens(tokenize(formula), metals, valences, formula)
    compound_class = classify_profile(profile)
    logger.debug("%s classified by structure: %s", formula, compound_class)
    return compound_class
