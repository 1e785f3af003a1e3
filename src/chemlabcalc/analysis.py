"""End-to-end compound analysis.

The pipeline runs validation, expansion, molar mass, classification and
equivalent weight in sequence; the density estimate is computed from the
same validated formula. Every stage reads its static tables from an
``EngineConfiguration``, which defaults to the built-in reference data.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from chemlabcalc import classify as classify_module
from chemlabcalc import density as density_module
from chemlabcalc.constants import DEFAULT_ATOMIC_VOLUME, DENSITY_DECIMALS
from chemlabcalc.elements import PERIODIC_TABLE, ElementTable
from chemlabcalc.equivalents import equivalent_weight, equivalents
from chemlabcalc.errors import FormulaError, InvalidFormula
from chemlabcalc.formula import REASON_EMPTY, REASON_MESSAGES, expand, require_valid, validate_formula
from chemlabcalc.mass import molar_mass
from chemlabcalc.models import AnalysisResult, CompoundClass, DensityEstimate
from chemlabcalc.reference import (
    ATOMIC_VOLUMES,
    KNOWN_COMPOUNDS,
    METALS,
    REFERENCE_DENSITIES,
    TYPICAL_VALENCES,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineConfiguration:
    """Static data consumed by the analysis pipeline.

    Attributes:
        elements: Element symbol to atomic mass table.
        known_compounds: Exact-match compound class overrides.
        reference_densities: Tabulated densities at 20 °C (g/mL).
        atomic_volumes: Per-element volume contributions (cm³/mol).
        metals: Symbols the classifier treats as metals.
        valences: Typical valences used by the classifier.
        default_atomic_volume: Volume for elements missing from ``atomic_volumes``.
        density_decimals: Rounding applied to estimated densities.
    """

    elements: ElementTable = PERIODIC_TABLE
    known_compounds: Mapping[str, CompoundClass] = field(default_factory=lambda: KNOWN_COMPOUNDS)
    reference_densities: Mapping[str, float] = field(default_factory=lambda: REFERENCE_DENSITIES)
    atomic_volumes: Mapping[str, float] = field(default_factory=lambda: ATOMIC_VOLUMES)
    metals: frozenset[str] = METALS
    valences: Mapping[str, int] = field(default_factory=lambda: TYPICAL_VALENCES)
    default_atomic_volume: float = DEFAULT_ATOMIC_VOLUME
    density_decimals: int = DENSITY_DECIMALS


DEFAULT_CONFIGURATION = EngineConfiguration()


class CompoundAnalyzer:
    """Formula interpretation bound to one ``EngineConfiguration``."""

    def __init__(self, configuration: EngineConfiguration = DEFAULT_CONFIGURATION) -> None:
        self.configuration = configuration

    def validate(self, formula: str) -> bool:
        return validate_formula(formula, self.configuration.elements)

    def molar_mass(self, formula: str) -> float:
        return molar_mass(formula, self.configuration.elements)

    def classify(self, formula: str) -> CompoundClass:
        config = self.configuration
        return classify_module.classify(
            formula, config.known_compounds, config.metals, config.valences
        )

    def estimate_density(self, formula: str, molar_mass: float) -> DensityEstimate:
        config = self.configuration
        return density_module.estimate_density(
            formula,
            molar_mass,
            densities=config.reference_densities,
            volumes=config.atomic_volumes,
            default_volume=config.default_atomic_volume,
            decimals=config.density_decimals,
        )

    def analyze(self, formula: str) -> AnalysisResult:
        """Run the full pipeline on a user-typed formula.

        Surrounding whitespace is stripped before validation.

        Raises:
            InvalidFormula: The formula is empty or syntactically rejected.
            ComputationError: A numeric stage produced a non-finite or zero value.
            DivisionByZero: The classification or composition gave a zero divisor.
        """
        normalized = formula.strip() if isinstance(formula, str) else ""
        if not normalized:
            raise InvalidFormula(REASON_MESSAGES[REASON_EMPTY], formula, reason=REASON_EMPTY)

        try:
            require_valid(normalized, self.configuration.elements)
            expanded = expand(normalized)
            mass = self.molar_mass(expanded)
            compound_class = self.classify(normalized)
            weight = equivalent_weight(compound_class, mass)
            count = equivalents(mass, weight)
            density = self.estimate_density(normalized, mass)
        except FormulaError as exc:
            if exc.formula is None:
                exc.formula = normalized
            logger.debug("Analysis of %r failed: %s", normalized, exc)
            raise

        logger.debug(
            "Analysed %s: M=%.4f g/mol, %s, Eq=%.4f g/eq, rho=%s g/mL (%s)",
            normalized,
            mass,
            compound_class.kind,
            weight,
            density.value,
            density.source,
        )
        return AnalysisResult(
            formula=normalized,
            expanded_formula=expanded,
            molar_mass=mass,
            compound_class=compound_class,
            equivalent_weight=weight,
            equivalents=count,
            density=density.value,
            density_source=density.source,
        )


def analyze_compound(
    formula: str, configuration: EngineConfiguration = DEFAULT_CONFIGURATION
) -> AnalysisResult:
    """Analyse ``formula`` with the given (or built-in) reference data."""
    return CompoundAnalyzer(configuration).analyze(formula)
