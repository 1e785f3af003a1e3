"""Numeric constants shared by the formula engine."""

from __future__ import annotations

import re

# Fallback molar volume for elements missing from the atomic volume table (cm³/mol).
DEFAULT_ATOMIC_VOLUME = 15.0

# Decimal places kept on estimated densities (g/mL).
DENSITY_DECIMALS = 3

# Empirical biomass formula, always normalised to one mole of carbon: CH(h)O(o)N(n).
BIOMASS_PATTERN = re.compile(
    r"^CH(\d+(?:\.\d*)?|\.\d+)O(\d+(?:\.\d*)?|\.\d+)N(\d+(?:\.\d*)?|\.\d+)$"
)

# One uppercase letter, an optional lowercase letter, an optional decimal count.
ELEMENT_TOKEN_PATTERN = re.compile(r"([A-Z][a-z]?)(\d*\.?\d*)")

# Multiplier written right after a closing parenthesis.
GROUP_MULTIPLIER_PATTERN = re.compile(r"\d*\.?\d*")

FORMULA_CHARSET_PATTERN = re.compile(r"^[A-Za-z0-9().]+$")
