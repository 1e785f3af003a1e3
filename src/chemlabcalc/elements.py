"""Element symbol to standard atomic mass lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

# Standard atomic masses (g/mol), elements 1-94.
ATOMIC_MASSES: Mapping[str, float] = MappingProxyType(
    {
        "H": 1.008, "He": 4.003, "Li": 6.941, "Be": 9.012, "B": 10.811,
        "C": 12.011, "N": 14.007, "O": 16.000, "F": 18.998, "Ne": 20.180,
        "Na": 22.990, "Mg": 24.305, "Al": 26.982, "Si": 28.086, "P": 30.974,
        "S": 32.065, "Cl": 35.453, "Ar": 39.948, "K": 39.098, "Ca": 40.078,
        "Sc": 44.956, "Ti": 47.867, "V": 50.942, "Cr": 51.996, "Mn": 54.938,
        "Fe": 55.845, "Co": 58.933, "Ni": 58.693, "Cu": 63.546, "Zn": 65.380,
        "Ga": 69.723, "Ge": 72.640, "As": 74.922, "Se": 78.960, "Br": 79.904,
        "Kr": 83.798, "Rb": 85.468, "Sr": 87.620, "Y": 88.906, "Zr": 91.224,
        "Nb": 92.906, "Mo": 95.960, "Tc": 98.000, "Ru": 101.070, "Rh": 102.906,
        "Pd": 106.420, "Ag": 107.868, "Cd": 112.411, "In": 114.818, "Sn": 118.710,
        "Sb": 121.760, "Te": 127.600, "I": 126.904, "Xe": 131.293, "Cs": 132.905,
        "Ba": 137.327, "La": 138.905, "Ce": 140.116, "Pr": 140.908, "Nd": 144.242,
        "Pm": 145.000, "Sm": 150.360, "Eu": 151.964, "Gd": 157.250, "Tb": 158.925,
        "Dy": 162.500, "Ho": 164.930, "Er": 167.259, "Tm": 168.934, "Yb": 173.054,
        "Lu": 174.967, "Hf": 178.490, "Ta": 180.948, "W": 183.840, "Re": 186.207,
        "Os": 190.230, "Ir": 192.217, "Pt": 195.084, "Au": 196.967, "Hg": 200.590,
        "Tl": 204.383, "Pb": 207.200, "Bi": 208.980, "Po": 209.000, "At": 210.000,
        "Rn": 222.000, "Fr": 223.000, "Ra": 226.000, "Ac": 227.000, "Th": 232.038,
        "Pa": 231.036, "U": 238.029, "Np": 237.000, "Pu": 244.000,
    }
)


@dataclass(frozen=True)
class ElementTable:
    """Read-only mapping of element symbols to atomic masses.

    The table is built once and passed explicitly to every stage that needs
    it; the default instance is ``PERIODIC_TABLE``.
    """

    masses: Mapping[str, float] = field(default_factory=lambda: ATOMIC_MASSES)

    def __post_init__(self) -> None:
        if not isinstance(self.masses, MappingProxyType):
            object.__setattr__(self, "masses", MappingProxyType(dict(self.masses)))

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.masses

    def __iter__(self) -> Iterator[str]:
        return iter(self.masses)

    def __len__(self) -> int:
        return len(self.masses)

    def mass(self, symbol: str) -> float:
        """Atomic mass of ``symbol``; raises ``KeyError`` for unknown symbols."""
        return self.masses[symbol]


PERIODIC_TABLE = ElementTable()
