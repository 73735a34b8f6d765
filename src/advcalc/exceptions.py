"""Custom exceptions for the advcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, dividend: float) -> None:
        super().__init__("Division by zero isn't permitted", dividend)
        self.dividend = dividend


class InvalidInputError(CalculatorError):
    """Raised when an operand is invalid (NaN, Inf, wrong type)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class UnsupportedSymbolError(CalculatorError):
    """Base for symbols an entry point does not recognise."""

    label = "Symbol"
    verb = "isn't supported"

    def __init__(self, symbol: Any) -> None:
        super().__init__(f"{self.label} '{symbol}' {self.verb}")
        self.symbol = symbol


class UnsupportedOperatorError(UnsupportedSymbolError):
    """Raised for a binary operator outside + - * /."""

    label = "Operator"
    verb = "isn't defined"


class UnsupportedActionError(UnsupportedSymbolError):
    """Raised for a unary action that is neither a digit nor '!'."""

    label = "Action"


class UnsupportedParameterError(UnsupportedSymbolError):
    """Raised for a classification kind other than 'A' or 'P'."""

    label = "Parameter"


class NumberOutOfRangeError(CalculatorError):
    """Raised when the accumulated value is outside an operation's domain."""

    def __init__(
        self,
        number: float,
        min_val: float | None = None,
        max_val: float | None = None,
        reason: str | None = None,
    ) -> None:
        if reason is None:
            lower = "-inf" if min_val is None else f"{min_val:g}"
            upper = "inf" if max_val is None else f"{max_val:g}"
            reason = f"Number {number:.2f} is not in range [{lower}, {upper}]"
        super().__init__(reason)
        self.number = number
        self.min_val = min_val
        self.max_val = max_val
