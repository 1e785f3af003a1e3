"""Equivalent weight and equivalents per mole."""

from __future__ import annotations

import math

from chemlabcalc.errors import ComputationError, DivisionByZero
from chemlabcalc.models import Acid, Base, Biomass, CompoundClass, Oxidation, Salt


def reactive_units(compound_class: CompoundClass) -> float | None:
    """Divisor applied to the molar mass, or None when the molar mass is used as is."""
    if isinstance(compound_class, Acid):
        return compound_class.hydrogens or None
    if isinstance(compound_class, (Base, Salt)):
        return compound_class.valence or None
    if isinstance(compound_class, Oxidation):
        return compound_class.oxidation or compound_class.valence or None
    if isinstance(compound_class, Biomass):
        return None
    raise TypeError(f"Unsupported compound class: {compound_class!r}")


def equivalent_weight(compound_class: CompoundClass, molar_mass: float) -> float:
    """Molar mass divided by the reactive units of ``compound_class`` (g/eq).

    A zero hydrogen or valence count falls back to the molar mass itself.

    Raises:
        ComputationError: ``molar_mass``, the divisor or the quotient is not finite.
        DivisionByZero: The resulting equivalent weight is zero.
    """
    if not math.isfinite(molar_mass):
        raise ComputationError(f"Molar mass is not finite ({molar_mass})")
    divisor = reactive_units(compound_class)
    if divisor is not None and not math.isfinite(divisor):
        raise ComputationError(f"Reactive unit count is not finite ({divisor})")

    weight = molar_mass if divisor is None else molar_mass / divisor
    if weight == 0.0:
        raise DivisionByZero("Equivalent weight is zero")
    if not math.isfinite(weight):
        raise ComputationError(f"Equivalent weight is not finite ({weight})")
    return weight


def equivalents(molar_mass: float, weight: float) -> float:
    """Reactive units per mole."""
    if not math.isfinite(weight):
        raise ComputationError(f"Equivalent weight is not finite ({weight})")
    if weight == 0.0:
        raise DivisionByZero("Equivalent weight is zero")
    value = molar_mass / weight
    if not math.isfinite(value) or value <= 0.0:
        raise ComputationError(f"Equivalents must be finite and positive ({value})")
    return value
