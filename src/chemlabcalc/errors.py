"""Error types raised by the formula engine."""

from __future__ import annotations


class FormulaError(ValueError):
    """Base class for every failure while interpreting a formula."""

    def __init__(self, message: str, formula: str | None = None) -> None:
        super().__init__(message)
        self.formula = formula


class InvalidFormula(FormulaError):
    """The formula was rejected on syntax (characters, parentheses, elements)."""

    def __init__(self, message: str, formula: str | None = None, reason: str = "syntax") -> None:
        super().__init__(message, formula)
        self.reason = reason


class UnknownElement(InvalidFormula):
    """A synthesized token names a symbol missing from the element table."""

    def __init__(self, symbol: str, formula: str | None = None) -> None:
        super().__init__(f"Unknown element: {symbol}", formula, reason="unknown_element")
        self.symbol = symbol


class ComputationError(FormulaError):
    """A numeric intermediate was non-finite, zero or unparsable."""


class DivisionByZero(ComputationError):
    """A degenerate classification or composition produced a zero divisor."""
