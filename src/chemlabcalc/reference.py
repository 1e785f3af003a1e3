"""Curated reference data for common laboratory reagents."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from chemlabcalc.models import Acid, Base, CompoundClass, Oxidation, Salt

# Exact-match overrides consulted before the structural heuristic.
KNOWN_COMPOUNDS: Mapping[str, CompoundClass] = MappingProxyType(
    {
        # Acids
        "H2SO4": Acid(hydrogens=2),
        "HCl": Acid(hydrogens=1),
        "H3PO4": Acid(hydrogens=3),
        "HNO3": Acid(hydrogens=1),
        "H2CO3": Acid(hydrogens=2),
        "CH3COOH": Acid(hydrogens=1),
        # Bases
        "NaOH": Base(valence=1),
        "KOH": Base(valence=1),
        "Ca(OH)2": Base(valence=2),
        "Al(OH)3": Base(valence=3),
        "NH4OH": Base(valence=1),
        # Salts
        "FeCl3": Salt(valence=3),
        "CuSO4": Salt(valence=2),
        "Al2(SO4)3": Salt(valence=3),
        "NaCl": Salt(valence=1),
        "KCl": Salt(valence=1),
        # Special cases: water is treated as a diprotic acid.
        "H2O": Acid(hydrogens=2),
        "O2": Oxidation(oxidation=2),
        "H2": Oxidation(oxidation=2),
        # Metals
        "Al": Oxidation(valence=3),
        "Fe": Oxidation(valence=3),
        "Cu": Oxidation(valence=2),
        "Zn": Oxidation(valence=2),
    }
)

# Densities at 20 °C (g/mL), keyed by the formula exactly as typed.
REFERENCE_DENSITIES: Mapping[str, float] = MappingProxyType(
    {
        "H2O": 1.000,
        "H2SO4": 1.840,
        "HCl": 1.190,
        "HNO3": 1.513,
        "NaOH": 2.130,
        "KOH": 2.120,
        "CH3OH": 0.792,
        "C2H5OH": 0.789,
        "CH3COOH": 1.049,
        "NH3": 0.769,
        "CCl4": 1.594,
        "CHCl3": 1.489,
        "C6H6": 0.879,
        "C6H12": 0.779,
        "C7H8": 0.867,
        "NaCl": 2.165,
        "KCl": 1.984,
        "CaCl2": 2.150,
        "FeCl3": 2.804,
        "CuSO4": 3.603,
        "ZnSO4": 3.540,
        "Al2(SO4)3": 2.672,
        "Na2CO3": 2.540,
        "K2CO3": 2.430,
        "CaCO3": 2.711,
        "Fe2O3": 5.242,
        "CuO": 6.315,
        "ZnO": 5.606,
        "SiO2": 2.648,
        "TiO2": 4.230,
    }
)

# Approximate atomic volume contributions (cm³/mol) for the density estimate.
ATOMIC_VOLUMES: Mapping[str, float] = MappingProxyType(
    {
        "H": 1.2,
        "C": 14.0,
        "N": 15.6,
        "O": 14.0,
        "F": 13.8,
        "Cl": 22.7,
        "Br": 27.0,
        "I": 32.0,
        "S": 25.2,
        "P": 24.3,
        "Na": 23.7,
        "K": 45.3,
        "Ca": 29.9,
        "Mg": 13.9,
        "Al": 10.0,
        "Si": 12.1,
        "Fe": 7.1,
        "Cu": 7.1,
        "Zn": 9.2,
        "Ag": 10.3,
        "Au": 10.2,
        "Pt": 9.1,
        "Hg": 14.8,
    }
)

# Elements the classifier treats as metals.
METALS: frozenset[str] = frozenset(
    {"Na", "K", "Ca", "Mg", "Al", "Fe", "Cu", "Zn", "Ag", "Ba", "Li"}
)

TYPICAL_VALENCES: Mapping[str, int] = MappingProxyType(
    {
        "H": 1, "Na": 1, "K": 1, "Li": 1, "Ag": 1,
        "Mg": 2, "Ca": 2, "Ba": 2, "Zn": 2, "Cu": 2,
        "Al": 3, "Fe": 3, "Cr": 3,
        "C": 4, "Si": 4,
        "N": 3, "P": 3,
        "O": 2, "S": 2,
    }
)
