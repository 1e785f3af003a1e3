"""ChemLabCalc chemical formula engine."""

from chemlabcalc.analysis import (
    DEFAULT_CONFIGURATION,
    CompoundAnalyzer,
    EngineConfiguration,
    analyze_compound,
)
from chemlabcalc.classify import classify
from chemlabcalc.density import estimate_density
from chemlabcalc.elements import PERIODIC_TABLE, ElementTable
from chemlabcalc.equivalents import equivalent_weight, equivalents
from chemlabcalc.errors import (
    ComputationError,
    DivisionByZero,
    FormulaError,
    InvalidFormula,
    UnknownElement,
)
from chemlabcalc.formula import expand, tokenize, validate_formula
from chemlabcalc.mass import molar_mass
from chemlabcalc.models import (
    Acid,
    AnalysisResult,
    Base,
    Biomass,
    DensityEstimate,
    FormulaToken,
    Oxidation,
    Salt,
)

__all__ = [
    "DEFAULT_CONFIGURATION",
    "CompoundAnalyzer",
    "EngineConfiguration",
    "analyze_compound",
    "classify",
    "estimate_density",
    "PERIODIC_TABLE",
    "ElementTable",
    "equivalent_weight",
    "equivalents",
    "ComputationError",
    "DivisionByZero",
    "FormulaError",
    "InvalidFormula",
    "UnknownElement",
    "expand",
    "tokenize",
    "validate_formula",
    "molar_mass",
    "Acid",
    "AnalysisResult",
    "Base",
    "Biomass",
    "DensityEstimate",
    "FormulaToken",
    "Oxidation",
    "Salt",
]
