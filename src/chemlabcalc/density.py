"""Density lookup with an atomic-volume fallback.

The fallback is a rough approximation, not a physical model: it sums fixed
per-element volume contributions and ignores packing, bonding and phase.
The formula is scanned character by character: an uppercase letter opens an
element, lowercase letters extend it, digits and dots form its count and
anything else (parentheses) is skipped. A group multiplier therefore
attaches to the last element of the group. Every count but the last is
truncated to its leading integer (``H1.8`` counts one hydrogen); the last
count keeps its leading decimal.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping

import numpy as np

from chemlabcalc.constants import DEFAULT_ATOMIC_VOLUME, DENSITY_DECIMALS
from chemlabcalc.errors import ComputationError, DivisionByZero
from chemlabcalc.models import DensityEstimate
from chemlabcalc.reference import ATOMIC_VOLUMES, REFERENCE_DENSITIES

logger = logging.getLogger(__name__)

SOURCE_REFERENCE = "reference"
SOURCE_ESTIMATED = "estimated"


_LEADING_INTEGER = re.compile(r"\d+")
_LEADING_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _scan_count(text: str, formula: str, last: bool) -> float:
    if not text:
        return 1.0
    match = (_LEADING_DECIMAL if last else _LEADING_INTEGER).match(text)
    if match is None:
        raise ComputationError(f"Invalid count {text!r}", formula)
    return float(match.group())


def scan_elements(formula: str) -> list[tuple[str, float]]:
    """Split ``formula`` into (element, count) pairs for the volume sum."""
    raw: list[tuple[str, str]] = []
    element = ""
    number = ""
    for char in formula:
        if "A" <= char <= "Z":
            if element:
                raw.append((element, number))
            element = char
            number = ""
        elif "a" <= char <= "z":
            element += char
        elif "0" <= char <= "9" or char == ".":
            number += char
    if element:
        raw.append((element, number))
    last = len(raw) - 1
    return [
        (symbol, _scan_count(text, formula, index == last))
        for index, (symbol, text) in enumerate(raw)
    ]


def molecular_volume(
    formula: str,
    volumes: Mapping[str, float] = ATOMIC_VOLUMES,
    default_volume: float = DEFAULT_ATOMIC_VOLUME,
) -> float:
    """Approximate molar volume (cm³/mol) as a sum of atomic contributions."""
    pairs = scan_elements(formula)
    contributions = np.array([volumes.get(element, default_volume) for element, _ in pairs])
    counts = np.array([count for _, count in pairs])
    return float(np.dot(contributions, counts)) if pairs else 0.0


def estimate_density(
    formula: str,
    molar_mass: float,
    densities: Mapping[str, float] = REFERENCE_DENSITIES,
    volumes: Mapping[str, float] = ATOMIC_VOLUMES,
    default_volume: float = DEFAULT_ATOMIC_VOLUME,
    decimals: int = DENSITY_DECIMALS,
) -> DensityEstimate:
    """Reference density for ``formula`` if tabulated, else molar mass / molecular volume.

    Raises:
        ComputationError: ``molar_mass`` is not finite and positive, or the
            estimate is not finite and positive.
        DivisionByZero: The summed molecular volume is zero.
    """
    reference = densities.get(formula)
    if reference is not None:
        logger.debug("Density of %s from reference table: %s", formula, reference)
        return DensityEstimate(value=reference, source=SOURCE_REFERENCE)

    if not np.isfinite(molar_mass) or molar_mass <= 0.0:
        raise ComputationError(f"Molar mass must be finite and positive ({molar_mass})", formula)
    volume = molecular_volume(formula, volumes, default_volume)
    if not np.isfinite(volume):
        raise ComputationError(f"Molecular volume is not finite ({volume})", formula)
    if volume == 0.0:
        raise DivisionByZero("Molecular volume is zero", formula)

    value = float(np.round(molar_mass / volume, decimals))
    if not np.isfinite(value) or value <= 0.0:
        raise ComputationError(f"Estimated density must be finite and positive ({value})", formula)
    logger.debug("Density of %s estimated at %s g/mL (volume %.3f cm3/mol)", formula, value, volume)
    return DensityEstimate(value=value, source=SOURCE_ESTIMATED)
