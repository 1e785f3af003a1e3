"""Data structures for formula tokens, compound classes and analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class FormulaToken:
    element: str
    count: Fraction = Fraction(1)


@dataclass(frozen=True)
class Acid:
    hydrogens: float

    kind: ClassVar[str] = "acid"
    summary: ClassVar[str] = "Available H+ per formula unit (N = M x acidity)"

    def parameters(self) -> dict[str, float]:
        return {"hydrogens": self.hydrogens}


@dataclass(frozen=True)
class Base:
    valence: float

    kind: ClassVar[str] = "base"
    summary: ClassVar[str] = "OH- groups or metal charges (N = M x basicity)"

    def parameters(self) -> dict[str, float]:
        return {"valence": self.valence}


@dataclass(frozen=True)
class Salt:
    valence: float

    kind: ClassVar[str] = "salt"
    summary: ClassVar[str] = "Metal charges per formula unit (N = M x charges)"

    def parameters(self) -> dict[str, float]:
        return {"valence": self.valence}


@dataclass(frozen=True)
class Oxidation:
    """Redox-active species.

    ``oxidation`` is an explicit electron count (non-metal oxides, O2, H2);
    ``valence`` is the typical valence of a metal or non-metal. When both are
    set the oxidation count wins.
    """

    oxidation: float | None = None
    valence: float | None = None

    kind: ClassVar[str] = "oxidation"
    summary: ClassVar[str] = "Charges or oxidation state (N = M x oxidation state)"

    def parameters(self) -> dict[str, float]:
        params = {}
        if self.oxidation is not None:
            params["oxidation"] = self.oxidation
        if self.valence is not None:
            params["valence"] = self.valence
        return params


@dataclass(frozen=True)
class Biomass:
    kind: ClassVar[str] = "biomass"
    summary: ClassVar[str] = "Empirical biomass formula (average composition per mole of carbon)"

    def parameters(self) -> dict[str, float]:
        return {}


CompoundClass = Union[Acid, Base, Salt, Oxidation, Biomass]


@dataclass(frozen=True)
class DensityEstimate:
    value: float  # g/mL
    source: str  # "reference" or "estimated"


@dataclass(frozen=True)
class AnalysisResult:
    """Everything derived from one formula string.

    Attributes:
        formula: The normalised input formula.
        expanded_formula: Parenthesis-free rendition used for the mass sum.
        molar_mass: Molar mass (g/mol).
        compound_class: Classification driving the equivalent weight.
        equivalent_weight: Molar mass per reactive unit (g/eq).
        equivalents: Reactive units per mole (molar_mass / equivalent_weight).
        density: Reference or estimated density (g/mL).
        density_source: ``"reference"`` or ``"estimated"``.
    """

    formula: str
    expanded_formula: str
    molar_mass: float
    compound_class: CompoundClass
    equivalent_weight: float
    equivalents: float
    density: float
    density_source: str

    @property
    def compound_type(self) -> str:
        return self.compound_class.kind

    def as_dict(self) -> dict[str, Any]:
        return {
            "formula": self.formula,
            "expanded_formula": self.expanded_formula,
            "molar_mass": self.molar_mass,
            "compound_type": self.compound_type,
            "compound_parameters": self.compound_class.parameters(),
            "compound_summary": self.compound_class.summary,
            "equivalent_weight": self.equivalent_weight,
            "equivalents": self.equivalents,
            "density": self.density,
            "density_source": self.density_source,
        }
